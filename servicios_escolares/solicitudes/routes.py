# servicios_escolares/solicitudes/routes.py

from flask import abort, jsonify, request
import logging

from servicios_escolares import get_services
from servicios_escolares.solicitudes import solicitudes_bp
from servicios_escolares.solicitudes.forms import (
    BookReservationForm,
    DocumentRequestForm,
    EnrollmentForm,
    IncidentForm,
    ParentMessageForm,
    ResolveTicketForm,
    StatusUpdateForm,
    StudentReasonForm,
    TechScoreForm,
    TicketForm,
    VisitorForm,
    WorkLogForm,
)
from servicios_escolares.utils import form_errors_response, request_payload

logger = logging.getLogger(__name__)


def create_from_form(form, create):
    """Valida el formulario y crea el registro con el cuerpo completo de la petición."""
    if not form.validate_on_submit():
        return form_errors_response(form)
    record = create(request_payload())
    return jsonify(record.to_dict()), 201


def record_list(records):
    return jsonify([record.to_dict() for record in records])


def status_filter():
    return request.args.get('status') or None


# --- Solicitudes de documentos ---

@solicitudes_bp.route('/documentos', methods=['POST'])
def create_document_request():
    return create_from_form(DocumentRequestForm(), get_services().create_document_request)


@solicitudes_bp.route('/documentos', methods=['GET'])
def list_document_requests():
    return record_list(get_services().get_requests(status_filter()))


@solicitudes_bp.route('/documentos/<string:request_id>', methods=['GET'])
def document_request_detail(request_id):
    document_request = get_services().get_request_by_id(request_id)
    if document_request is None:
        abort(404)
    return jsonify(document_request.to_dict())


@solicitudes_bp.route('/documentos/<string:request_id>/estado', methods=['POST'])
def update_document_request_status(request_id):
    form = StatusUpdateForm()
    if not form.validate_on_submit():
        return form_errors_response(form)

    services = get_services()
    if not services.update_request_status(request_id, form.status.data, form.comment.data or ""):
        abort(404)
    logger.info(f"Solicitud {request_id} actualizada a '{form.status.data}'.")
    return jsonify(services.get_request_by_id(request_id).to_dict())


# --- Matrícula ---

@solicitudes_bp.route('/matriculas', methods=['POST'])
def create_enrollment():
    return create_from_form(EnrollmentForm(), get_services().create_enrollment)


@solicitudes_bp.route('/matriculas', methods=['GET'])
def list_enrollments():
    return record_list(get_services().get_enrollments(status_filter()))


@solicitudes_bp.route('/matriculas/<string:enrollment_id>/estado', methods=['POST'])
def update_enrollment_status(enrollment_id):
    form = StatusUpdateForm()
    if not form.validate_on_submit():
        return form_errors_response(form)
    if not get_services().update_enrollment_status(enrollment_id, form.status.data):
        abort(404)
    return jsonify({"id": enrollment_id, "status": form.status.data})


# --- Enfermería ---

@solicitudes_bp.route('/enfermeria/visitas', methods=['POST'])
def register_nurse_visit():
    return create_from_form(StudentReasonForm(), get_services().register_nurse_visit)


@solicitudes_bp.route('/enfermeria/estadisticas', methods=['GET'])
def nurse_stats():
    return jsonify(get_services().get_nurse_stats())


# --- Orientación y alertas tempranas ---

@solicitudes_bp.route('/orientacion/citas', methods=['POST'])
def create_counseling_appointment():
    return create_from_form(StudentReasonForm(), get_services().create_counseling_appointment)


@solicitudes_bp.route('/orientacion/citas/<string:appointment_id>/estado', methods=['POST'])
def update_appointment_status(appointment_id):
    form = StatusUpdateForm()
    if not form.validate_on_submit():
        return form_errors_response(form)
    if not get_services().update_appointment_status(appointment_id, form.status.data):
        abort(404)
    return jsonify({"id": appointment_id, "status": form.status.data})


@solicitudes_bp.route('/alertas', methods=['POST'])
def create_early_alert():
    return create_from_form(StudentReasonForm(), get_services().create_early_alert)


@solicitudes_bp.route('/alertas', methods=['GET'])
def list_early_alerts():
    return record_list(get_services().get_early_alerts(status_filter()))


# --- Servicios técnicos ---

@solicitudes_bp.route('/tickets', methods=['POST'])
def create_ticket():
    return create_from_form(TicketForm(), get_services().create_ticket)


@solicitudes_bp.route('/tickets', methods=['GET'])
def list_tickets():
    return record_list(get_services().get_all_tickets(status_filter()))


@solicitudes_bp.route('/tickets/<string:ticket_id>', methods=['GET'])
def ticket_detail(ticket_id):
    ticket = get_services().get_ticket_by_id(ticket_id)
    if ticket is None:
        abort(404)
    return jsonify(ticket.to_dict())


@solicitudes_bp.route('/tickets/<string:ticket_id>/horas', methods=['POST'])
def log_ticket_hours(ticket_id):
    form = WorkLogForm()
    if not form.validate_on_submit():
        return form_errors_response(form)

    services = get_services()
    logged = services.log_wbl_hours(
        ticket_id,
        form.studentName.data,
        form.hours.data,
        form.description.data,
        evidence_url=form.evidenceUrl.data,
        mark_completed=form.markCompleted.data,
    )
    if not logged:
        abort(404)
    logger.info(f"{form.studentName.data} registró {form.hours.data} horas en el ticket {ticket_id}.")
    return jsonify(services.get_ticket_by_id(ticket_id).to_dict())


@solicitudes_bp.route('/tickets/<string:ticket_id>/resolver', methods=['POST'])
def resolve_ticket(ticket_id):
    form = ResolveTicketForm()
    if not form.validate_on_submit():
        return form_errors_response(form)

    services = get_services()
    ticket = services.resolve_ticket(ticket_id, form.techName.data)
    if ticket is not None:
        return jsonify(ticket.to_dict())
    if services.get_ticket_by_id(ticket_id) is None:
        abort(404)
    return jsonify({"error": f"El ticket {ticket_id} ya está resuelto."}), 409


@solicitudes_bp.route('/tecnicos/<string:tech_name>/puntuacion', methods=['GET'])
def tech_score(tech_name):
    return jsonify({"tech": tech_name, "score": get_services().get_tech_score(tech_name)})


@solicitudes_bp.route('/tecnicos/<string:tech_name>/puntuacion', methods=['POST'])
def save_tech_score(tech_name):
    form = TechScoreForm()
    if not form.validate_on_submit():
        return form_errors_response(form)
    get_services().save_tech_score(tech_name, form.score.data)
    return jsonify({"tech": tech_name, "score": form.score.data})


# --- Biblioteca ---

@solicitudes_bp.route('/biblioteca/libros', methods=['GET'])
def search_books():
    return jsonify(get_services().search_books(request.args.get('q')))


@solicitudes_bp.route('/biblioteca/reservas', methods=['POST'])
def reserve_book():
    return create_from_form(BookReservationForm(), get_services().reserve_book)


# --- Portal de padres ---

@solicitudes_bp.route('/padres/mensajes', methods=['POST'])
def send_parent_message():
    return create_from_form(ParentMessageForm(), get_services().send_parent_message)


# --- Seguridad ---

@solicitudes_bp.route('/seguridad/visitantes', methods=['POST'])
def register_visitor():
    return create_from_form(VisitorForm(), get_services().register_visitor)


@solicitudes_bp.route('/seguridad/visitantes', methods=['GET'])
def list_visitors():
    return record_list(get_services().get_visitors(status_filter()))


@solicitudes_bp.route('/seguridad/visitantes/<string:visitor_id>/salida', methods=['POST'])
def checkout_visitor(visitor_id):
    services = get_services()
    if services.checkout_visitor(visitor_id):
        return jsonify({"id": visitor_id, "status": "completed"})
    # Sin registro activo: o no existe o ya había salido
    if services.get_visitor_by_id(visitor_id) is None:
        abort(404)
    return jsonify({"error": f"La visita {visitor_id} ya tiene salida registrada."}), 409


@solicitudes_bp.route('/seguridad/incidentes', methods=['POST'])
def report_incident():
    return create_from_form(IncidentForm(), get_services().report_incident)
