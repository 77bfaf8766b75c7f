# servicios_escolares/services.py

"""
Gestor de servicios escolares: la superficie pública que consume la capa de
presentación. Cada operación delega en el repositorio genérico, que persiste
el documento completo y notifica después de cada mutación.
"""

import logging
from datetime import datetime, timedelta, timezone

from servicios_escolares.models import (
    BookReservation,
    CounselingAppointment,
    DocumentRequest,
    EarlyAlert,
    Enrollment,
    NewsItem,
    NurseVisit,
    ParentMessage,
    SecurityIncident,
    SupportTicket,
    VisitorLog,
    WorkLog,
)
from servicios_escolares.repositories import RecordRepository
from servicios_escolares.utils import now_iso, parse_iso, utc_now

logger = logging.getLogger(__name__)

BOOK_CATALOG = (
    {"id": "LIB001", "title": "Don Quijote de la Mancha", "author": "Miguel de Cervantes", "category": "Literatura"},
    {"id": "LIB002", "title": "Cien Años de Soledad", "author": "Gabriel García Márquez", "category": "Literatura"},
    {"id": "LIB003", "title": "Biología Celular", "author": "Albert Bruce", "category": "Ciencias"},
    {"id": "LIB004", "title": "Álgebra de Baldor", "author": "Aurelio Baldor", "category": "Matemáticas"},
    {"id": "LIB005", "title": "Historia de Puerto Rico", "author": "Fernando Picó", "category": "Historia"},
)

_NO_DATE = datetime.min.replace(tzinfo=timezone.utc)


def _moment_or_oldest(value):
    """Fecha ISO como datetime; las ausentes o inválidas cuentan como la más antigua."""
    try:
        return parse_iso(value)
    except (AttributeError, TypeError, ValueError):
        return _NO_DATE


class ServiceManager:

    def __init__(self, store, notifier, clock=now_iso, rng=None):
        self.store = store
        self.notifier = notifier
        self.clock = clock
        self.repo = RecordRepository(store, notifier, clock=clock, rng=rng)

    def get_config(self):
        return self.store.document.config

    # --- Solicitudes de documentos ---

    def create_document_request(self, payload):
        return self.repo.add(DocumentRequest.from_payload(payload))

    def get_request_by_id(self, request_id):
        return self.repo.find_by_id(DocumentRequest.COLLECTION, request_id)

    def get_requests(self, status=None):
        return self.repo.filter(DocumentRequest.COLLECTION, status=status or None)

    def update_request_status(self, request_id, new_status, admin_comment=""):
        return self.repo.update_status(DocumentRequest.COLLECTION, request_id, new_status, comment=admin_comment)

    # --- Matrícula ---

    def create_enrollment(self, payload):
        return self.repo.add(Enrollment.from_payload(payload))

    def get_enrollments(self, status=None):
        return self.repo.filter(Enrollment.COLLECTION, status=status or None)

    def update_enrollment_status(self, enrollment_id, new_status):
        return self.repo.update_status(Enrollment.COLLECTION, enrollment_id, new_status)

    # --- Enfermería ---

    def register_nurse_visit(self, payload):
        return self.repo.add(NurseVisit.from_payload(payload))

    def get_nurse_stats(self, now=None):
        """Estadísticas anónimas: total, visitas por motivo y visitas de los últimos 7 días."""
        visits = self.repo.records(NurseVisit.COLLECTION)
        one_week_ago = (now or utc_now()) - timedelta(days=7)
        stats = {"total": len(visits), "byType": {}, "lastWeek": 0}
        for visit in visits:
            stats["byType"][visit.reason] = stats["byType"].get(visit.reason, 0) + 1
            if _moment_or_oldest(visit.date) > one_week_ago:
                stats["lastWeek"] += 1
        return stats

    # --- Orientación y alertas tempranas ---

    def create_counseling_appointment(self, payload):
        return self.repo.add(CounselingAppointment.from_payload(payload))

    def update_appointment_status(self, appointment_id, new_status):
        return self.repo.update_status(CounselingAppointment.COLLECTION, appointment_id, new_status)

    def create_early_alert(self, payload):
        return self.repo.add(EarlyAlert.from_payload(payload))

    def get_early_alerts(self, status=None):
        return self.repo.filter(EarlyAlert.COLLECTION, status=status or None)

    # --- Servicios técnicos ---

    def create_ticket(self, payload):
        return self.repo.add(SupportTicket.from_payload(payload))

    def add_ticket(self, ticket):
        """Agrega un ticket ya construido por el llamador, sin reasignar su ID."""
        self.repo.records(SupportTicket.COLLECTION).append(ticket)
        self.repo.commit()
        return ticket

    def get_all_tickets(self, status=None):
        return self.repo.filter(SupportTicket.COLLECTION, status=status or None)

    def get_ticket_by_id(self, ticket_id):
        return self.repo.find_by_id(SupportTicket.COLLECTION, ticket_id)

    def update_ticket(self, ticket):
        self.repo.replace(SupportTicket.COLLECTION, ticket)
        return ticket

    def log_wbl_hours(self, ticket_id, student_name, hours, description, evidence_url=None, mark_completed=False):
        """
        Registra horas de trabajo WBL de un estudiante técnico en un ticket.
        Con mark_completed el ticket pasa a 'resuelto' si seguía abierto.
        """
        ticket = self.get_ticket_by_id(ticket_id)
        if ticket is None:
            return False

        timestamp = self.clock()
        ticket.logs.append(WorkLog(student_name=student_name, hours=hours, description=description,
                                   date=timestamp, evidence_url=evidence_url or None))
        closed = mark_completed and not ticket.is_terminal
        if closed:
            ticket.status = "resuelto"
            ticket.date_closed = timestamp
            ticket.last_update = timestamp
        self.repo.commit()
        if closed:
            self.notifier.notify(ticket, "updated")
        return True

    def resolve_ticket(self, ticket_id, tech_name):
        """
        Marca un ticket como resuelto. Un ticket ya resuelto no se sobrescribe:
        se devuelve None y se conservan el técnico y la fecha originales.
        """
        ticket = self.get_ticket_by_id(ticket_id)
        if ticket is None:
            return None
        if ticket.is_terminal:
            logger.info(f"El ticket {ticket_id} ya estaba resuelto por {ticket.resolved_by}; no se modifica.")
            return None

        timestamp = self.clock()
        ticket.status = "resuelto"
        ticket.resolved_by = tech_name
        ticket.resolved_date = timestamp
        ticket.last_update = timestamp
        self.repo.commit()
        self.notifier.notify(ticket, "updated")
        return ticket

    def save_tech_score(self, tech_name, score):
        self.store.document.tech_scores[tech_name] = score
        self.store.save()

    def get_tech_score(self, tech_name):
        return self.store.document.tech_scores.get(tech_name, 0)

    # --- Biblioteca ---

    def search_books(self, query=None):
        if not query:
            return list(BOOK_CATALOG)
        lower_q = query.lower()
        return [book for book in BOOK_CATALOG
                if lower_q in book["title"].lower() or lower_q in book["author"].lower()]

    def reserve_book(self, payload):
        return self.repo.add(BookReservation.from_payload(payload))

    # --- Portal de padres ---

    def send_parent_message(self, payload):
        return self.repo.add(ParentMessage.from_payload(payload))

    # --- Seguridad ---

    def register_visitor(self, payload):
        return self.repo.add(VisitorLog.from_payload(payload))

    def get_visitors(self, status=None):
        return self.repo.filter(VisitorLog.COLLECTION, status=status or None)

    def get_visitor_by_id(self, visitor_id):
        return self.repo.find_by_id(VisitorLog.COLLECTION, visitor_id)

    def checkout_visitor(self, visitor_id):
        visit = self.get_visitor_by_id(visitor_id)
        if visit is None or visit.status != "active":
            return False
        timestamp = self.clock()
        visit.check_out = timestamp
        visit.status = "completed"
        visit.last_update = timestamp
        self.repo.commit()
        self.notifier.notify(visit, "updated")
        return True

    def report_incident(self, payload):
        return self.repo.add(SecurityIncident.from_payload(payload))

    # --- Noticias ---

    def add_news(self, payload):
        return self.repo.add(NewsItem.from_payload(payload))

    def delete_news(self, news_id):
        return self.repo.delete(NewsItem.COLLECTION, news_id)

    def get_all_news(self):
        return self.repo.records(NewsItem.COLLECTION)

    def get_latest_news(self):
        news = self.get_all_news()
        if not news:
            return None
        # Ante empate gana la que se agregó antes; sin fecha válida queda al final
        return max(news, key=lambda item: _moment_or_oldest(item.date))
