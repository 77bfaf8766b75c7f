# servicios_escolares/asistente/routes.py

from flask import jsonify

from servicios_escolares import get_assistant
from servicios_escolares.asistente import asistente_bp
from servicios_escolares.asistente.forms import MessageForm
from servicios_escolares.utils import form_errors_response


@asistente_bp.route('/responder', methods=['POST'])
def respond():
    form = MessageForm()
    if not form.validate_on_submit():
        return form_errors_response(form)

    reply = get_assistant().respond(form.mensaje.data)
    return jsonify({"respuesta": reply})
