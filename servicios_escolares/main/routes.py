# servicios_escolares/main/routes.py
from flask import jsonify
from servicios_escolares import get_services
from servicios_escolares.main import main_bp

@main_bp.route('/')
@main_bp.route('/index')
def home():
    config = get_services().get_config()
    return jsonify({
        "escuela": config.get("schoolName"),
        "anioAcademico": config.get("academicYear"),
        "estado": "ok",
    })
