from flask import Blueprint

asistente_bp = Blueprint('asistente_bp', __name__)

from . import routes
