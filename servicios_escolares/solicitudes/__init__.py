from flask import Blueprint

solicitudes_bp = Blueprint('solicitudes_bp', __name__)

from . import routes
