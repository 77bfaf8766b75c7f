# servicios_escolares/__init__.py

from flask import Flask, current_app, jsonify
from flask_mail import Mail
from flask_pymongo import PyMongo
from flask_wtf.csrf import CSRFProtect
from pymongo.errors import ConnectionFailure, ConfigurationError
import logging
from logging.handlers import RotatingFileHandler
from config import DevelopmentConfig, ProductionConfig, TestingConfig
import os
import sys

from servicios_escolares.conversation import ConversationEngine
from servicios_escolares.exceptions import BaseAppException, InvalidPayloadError, InvalidStatusError, StorageError
from servicios_escolares.notifications import MailDispatcher, NotificationSimulator
from servicios_escolares.services import ServiceManager
from servicios_escolares.storage import JSONFileStorage, MongoStorage, PersistentStore

# --- Instancias de Extensiones ---
mail = Mail()
mongo = PyMongo()
csrf = CSRFProtect()

EXTENSION_KEY = "servicios_escolares"


# --- Funciones Auxiliares para Modularizar la Configuración ---

def build_storage_backend(app):
    """
    Crea el backend de almacenamiento según STORAGE_BACKEND.
    Con 'mongo' se verifica la conexión antes de continuar.
    """
    if app.config.get("STORAGE_BACKEND") != "mongo":
        app.logger.info(f"Usando almacenamiento local en {app.config['STORE_PATH']}.")
        return JSONFileStorage(app.config["STORE_PATH"])

    mongo_uri = app.config.get("MONGO_URI")
    if not mongo_uri:
        raise RuntimeError("FATAL: La variable de entorno MONGO_URI no está configurada.")

    app.logger.info("Intentando conectar a MongoDB...")

    try:
        mongo.init_app(app)
        mongo.cx.server_info() # Fuerza la conexión para verificarla
        app.logger.info("Conexión a MongoDB establecida exitosamente.")
    except (ConnectionFailure, ConfigurationError) as e:
        app.logger.error(f"Error al conectar o configurar MongoDB: {e}")
        raise RuntimeError(f"No se pudo conectar a la base de datos: {e}")

    return MongoStorage(mongo.db.servicios, app.config["STORAGE_KEY"])


def init_app_extensions(app):
    """
    Inicializa las extensiones de Flask y construye el almacén, el gestor de
    servicios y el asistente que comparten todas las rutas.
    """
    mail.init_app(app)
    csrf.init_app(app)

    store = PersistentStore(build_storage_backend(app), config={
        "schoolName": app.config["SCHOOL_NAME"],
        "academicYear": app.config["ACADEMIC_YEAR"],
    })
    store.load()

    dispatcher = MailDispatcher(app, mail) if app.config.get("NOTIFICATIONS_EMAIL_ENABLED") else None
    notifier = NotificationSimulator(dispatcher=dispatcher)

    app.extensions[EXTENSION_KEY] = {
        "store": store,
        "services": ServiceManager(store, notifier),
        "assistant": ConversationEngine(store),
    }


def get_store():
    return current_app.extensions[EXTENSION_KEY]["store"]


def get_services():
    return current_app.extensions[EXTENSION_KEY]["services"]


def get_assistant():
    return current_app.extensions[EXTENSION_KEY]["assistant"]


def register_app_blueprints(app):
    """
    Registra todos los Blueprints de la aplicación.
    """
    from servicios_escolares.main import main_bp
    app.register_blueprint(main_bp)

    from servicios_escolares.solicitudes import solicitudes_bp
    app.register_blueprint(solicitudes_bp, url_prefix='/api')

    from servicios_escolares.asistente import asistente_bp
    app.register_blueprint(asistente_bp, url_prefix='/asistente')

    from servicios_escolares.noticias import noticias_bp
    app.register_blueprint(noticias_bp, url_prefix='/noticias')

    # La API se consume con JSON desde la capa de presentación
    for blueprint in (solicitudes_bp, asistente_bp, noticias_bp):
        csrf.exempt(blueprint)

def configure_app_logging(app):
    """
    Configura el sistema de logging de la aplicación.
    """
    log_dir = app.config.get("LOG_DIR", "logs")
    if not os.path.exists(log_dir):
        os.mkdir(log_dir)

    for handler in app.logger.handlers[:]:
        app.logger.removeHandler(handler)

    file_handler = RotatingFileHandler(os.path.join(log_dir, "app.log"), maxBytes=10240, backupCount=10)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'))

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    if not app.debug and not app.testing:
        file_handler.setLevel(logging.INFO)
        stream_handler.setLevel(logging.INFO)
        app.logger.setLevel(logging.INFO)
    else:
        file_handler.setLevel(logging.DEBUG)
        stream_handler.setLevel(logging.DEBUG)
        app.logger.setLevel(logging.DEBUG)

    # app.logger es el logger 'servicios_escolares', padre de los loggers de cada módulo
    app.logger.addHandler(file_handler)
    app.logger.addHandler(stream_handler)

    app.logger.info("Logging inicializado")

def register_app_error_handlers(app):
    """
    Registra los manejadores de errores HTTP globales y los de la aplicación.
    """
    @app.errorhandler(400)
    def bad_request_error(error):
        return jsonify({"error": "Solicitud inválida."}), 400

    @app.errorhandler(404)
    def page_not_found_error(error):
        return jsonify({"error": "Recurso no encontrado."}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        return jsonify({"error": "Método no permitido."}), 405

    @app.errorhandler(500)
    def internal_server_error(error):
        current_app.logger.error(f"Internal Server Error: {error}", exc_info=True)
        return jsonify({"error": "Error interno del servidor."}), 500

    @app.errorhandler(InvalidPayloadError)
    def invalid_payload_error(error):
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(InvalidStatusError)
    def invalid_status_error(error):
        return jsonify({"error": str(error), "allowed": list(error.allowed)}), 400

    @app.errorhandler(StorageError)
    def storage_error(error):
        current_app.logger.error(f"Error de almacenamiento: {error} ({error.original_exception})", exc_info=True)
        return jsonify({"error": "No se pudieron guardar los datos. Intente de nuevo más tarde."}), 500

    @app.errorhandler(BaseAppException)
    def app_exception_error(error):
        current_app.logger.error(f"Error de la aplicación: {error}", exc_info=True)
        return jsonify({"error": str(error)}), 500

# --- Función de Fábrica de Aplicación (create_app) ---
def create_app(config_class="development", overrides=None):
    """
    Función de fábrica para crear y configurar la instancia de la aplicación Flask.
    """
    app = Flask(__name__)

    config_map = {
        'testing': TestingConfig,
        'production': ProductionConfig,
        'development': DevelopmentConfig
    }
    app.config.from_object(config_map.get(config_class, DevelopmentConfig))
    if overrides:
        app.config.update(overrides)

    configure_app_logging(app)
    init_app_extensions(app)
    register_app_blueprints(app)
    register_app_error_handlers(app)

    from servicios_escolares import commands as commands
    app.cli.add_command(commands.init_store_command)

    return app
