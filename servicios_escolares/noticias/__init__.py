from flask import Blueprint

noticias_bp = Blueprint('noticias_bp', __name__)

from . import routes
