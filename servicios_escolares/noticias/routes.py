# servicios_escolares/noticias/routes.py

from flask import abort, jsonify
import logging

from servicios_escolares import get_services
from servicios_escolares.noticias import noticias_bp
from servicios_escolares.noticias.forms import NewsForm
from servicios_escolares.utils import form_errors_response, request_payload

logger = logging.getLogger(__name__)


@noticias_bp.route('', methods=['GET'])
def list_news():
    return jsonify([item.to_dict() for item in get_services().get_all_news()])


@noticias_bp.route('/ultima', methods=['GET'])
def latest_news():
    latest = get_services().get_latest_news()
    return jsonify(latest.to_dict() if latest else None)


@noticias_bp.route('', methods=['POST'])
def publish_news():
    form = NewsForm()
    if not form.validate_on_submit():
        return form_errors_response(form)
    news = get_services().add_news(request_payload())
    logger.info(f"Noticia publicada: {news.title}")
    return jsonify(news.to_dict()), 201


@noticias_bp.route('/<string:news_id>', methods=['DELETE'])
def delete_news(news_id):
    if not get_services().delete_news(news_id):
        abort(404)
    logger.info(f"Noticia {news_id} eliminada.")
    return '', 204
