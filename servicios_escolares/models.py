# servicios_escolares/models.py

# Cada colección del documento tiene su propio tipo de registro con un conjunto
# explícito de campos. Los atributos se nombran en snake_case y se guardan en
# camelCase, que es el formato que consume la capa de presentación.

import re
from dataclasses import dataclass, field, fields
from typing import ClassVar, List, Optional

from servicios_escolares.exceptions import InvalidPayloadError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel(name):
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def to_snake(name):
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _serialize_value(value):
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class Serializable:
    """Conversión genérica dataclass <-> diccionario camelCase."""

    # Campos con listas de sub-documentos: nombre del campo -> tipo del elemento
    NESTED: ClassVar[dict] = {}

    def to_dict(self):
        data = {}
        for f in fields(self):
            if f.name == "extra":
                continue
            data[to_camel(f.name)] = _serialize_value(getattr(self, f.name))
        if getattr(self, "extra", None):
            data["extra"] = dict(self.extra)
        return data

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise InvalidPayloadError(f"Se esperaba un objeto para {cls.__name__}.")
        known = {f.name for f in fields(cls)}
        values = {}
        extra = dict(data.get("extra") or {})
        for key, value in data.items():
            if key == "extra":
                continue
            name = to_snake(key)
            if name not in known:
                extra[key] = value
                continue
            if name in cls.NESTED and value is not None:
                item_type = cls.NESTED[name]
                value = [item_type.from_dict(item) for item in value]
            values[name] = value
        if "extra" in known:
            values["extra"] = extra
        return cls(**values)


@dataclass
class Comment(Serializable):
    text: str = ""
    date: Optional[str] = None
    author: str = "Administrador"


@dataclass
class WorkLog(Serializable):
    student_name: str = ""
    hours: float = 0
    description: str = ""
    date: Optional[str] = None
    evidence_url: Optional[str] = None


@dataclass
class Record(Serializable):
    """
    Registro genérico de una colección del almacén.
    Las subclases declaran su colección, prefijo de ID, estados permitidos y
    el campo donde se sella la fecha de creación.
    """
    COLLECTION: ClassVar[str] = ""
    PREFIX: ClassVar[str] = ""
    STATUSES: ClassVar[tuple] = ()
    INITIAL_STATUS: ClassVar[Optional[str]] = None
    TERMINAL_STATUSES: ClassVar[tuple] = ()
    CREATED_FIELD: ClassVar[str] = "date_created"
    CREATED_EVENT: ClassVar[str] = "created"
    REQUIRED: ClassVar[tuple] = ()
    # Campos que administra el sistema y que nunca se copian desde la entrada
    MANAGED: ClassVar[tuple] = ("id", "status", "last_update")

    id: Optional[str] = None
    status: Optional[str] = None
    last_update: Optional[str] = None
    extra: dict = field(default_factory=dict)

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES

    def stamp_created(self, timestamp):
        setattr(self, self.CREATED_FIELD, timestamp)

    @classmethod
    def from_payload(cls, payload):
        """
        Construye un registro nuevo a partir de los datos del usuario.
        Los campos administrados se descartan y los desconocidos se guardan
        en 'extra'. Solo se valida la presencia de los campos obligatorios.
        """
        if not isinstance(payload, dict):
            raise InvalidPayloadError("Los datos de la solicitud deben ser un objeto.")
        managed = set(cls.MANAGED) | {cls.CREATED_FIELD} | set(cls.NESTED)
        cleaned = {k: v for k, v in payload.items() if to_snake(k) not in managed and k != "extra"}
        missing = [name for name in cls.REQUIRED
                   if cleaned.get(to_camel(name), cleaned.get(name)) in (None, "")]
        if missing:
            raise InvalidPayloadError(
                f"Faltan campos obligatorios: {', '.join(to_camel(name) for name in missing)}.")
        return cls.from_dict(cleaned)


@dataclass
class DocumentRequest(Record):
    COLLECTION = "solicitudes_documentos"
    PREFIX = "DOC"
    STATUSES = ("pendiente", "en_proceso", "completado", "rechazado")
    INITIAL_STATUS = "pendiente"
    TERMINAL_STATUSES = ("completado", "rechazado")
    CREATED_FIELD = "request_date"
    REQUIRED = ("type", "student_name", "email")
    NESTED = {"comments": Comment}

    type: str = ""  # 'certificacion', 'transcripcion', etc.
    student_name: str = ""
    student_id: Optional[str] = None
    grade: Optional[str] = None
    email: str = ""
    phone: Optional[str] = None
    details: Optional[str] = None
    request_date: Optional[str] = None
    comments: List[Comment] = field(default_factory=list)

    def stamp_created(self, timestamp):
        self.request_date = timestamp
        self.last_update = timestamp


@dataclass
class Enrollment(Record):
    COLLECTION = "matriculas"
    PREFIX = "MAT"
    STATUSES = ("pendiente", "en_proceso", "aprobada", "rechazada")
    INITIAL_STATUS = "pendiente"
    TERMINAL_STATUSES = ("aprobada", "rechazada")
    CREATED_FIELD = "request_date"
    CREATED_EVENT = "enrollment_created"
    REQUIRED = ("student_name", "grade")

    student_name: str = ""
    birth_date: Optional[str] = None
    grade: str = ""
    program: Optional[str] = None
    parent_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    request_date: Optional[str] = None


@dataclass
class NurseVisit(Record):
    COLLECTION = "enfermeria_visitas"
    PREFIX = "NUR"
    STATUSES = ("atendido",)
    INITIAL_STATUS = "atendido"
    TERMINAL_STATUSES = ("atendido",)
    CREATED_FIELD = "date"
    CREATED_EVENT = "nurse_visit_registered"
    REQUIRED = ("student_name", "reason")

    student_name: str = ""
    grade: Optional[str] = None
    reason: str = ""
    notes: Optional[str] = None
    date: Optional[str] = None


@dataclass
class CounselingAppointment(Record):
    COLLECTION = "citas_orientacion"
    PREFIX = "CIT"
    STATUSES = ("pendiente", "confirmada", "completada", "cancelada")
    INITIAL_STATUS = "pendiente"
    TERMINAL_STATUSES = ("completada", "cancelada")
    CREATED_EVENT = "appointment_created"
    REQUIRED = ("student_name", "reason")

    student_name: str = ""
    grade: Optional[str] = None
    email: Optional[str] = None
    reason: str = ""
    preferred_date: Optional[str] = None
    preferred_time: Optional[str] = None
    date_created: Optional[str] = None


@dataclass
class EarlyAlert(Record):
    COLLECTION = "alertas_tempranas"
    PREFIX = "ALT"
    STATUSES = ("activa", "en_seguimiento", "cerrada")
    INITIAL_STATUS = "activa"
    TERMINAL_STATUSES = ("cerrada",)
    CREATED_EVENT = "alert_created"
    REQUIRED = ("student_name", "reason")
    MANAGED = Record.MANAGED + ("priority",)

    student_name: str = ""
    grade: Optional[str] = None
    reason: str = ""
    reported_by: Optional[str] = None
    priority: str = "alta"
    date_created: Optional[str] = None


@dataclass
class SupportTicket(Record):
    COLLECTION = "tickets_soporte"
    PREFIX = "TICK"
    STATUSES = ("abierto", "resuelto")
    INITIAL_STATUS = "abierto"
    TERMINAL_STATUSES = ("resuelto",)
    CREATED_EVENT = "ticket_created"
    REQUIRED = ("description",)
    MANAGED = Record.MANAGED + ("assigned_to", "date_closed", "resolved_by", "resolved_date")
    NESTED = {"logs": WorkLog}

    requester_name: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None
    device: Optional[str] = None
    category: Optional[str] = None
    description: str = ""
    priority: Optional[str] = None
    assigned_to: Optional[str] = None
    date_created: Optional[str] = None
    date_closed: Optional[str] = None
    resolved_by: Optional[str] = None
    resolved_date: Optional[str] = None
    logs: List[WorkLog] = field(default_factory=list)


@dataclass
class BookReservation(Record):
    COLLECTION = "reservas_biblioteca"
    PREFIX = "RES"
    STATUSES = ("pendiente", "lista", "entregada", "cancelada")
    INITIAL_STATUS = "pendiente"
    TERMINAL_STATUSES = ("entregada", "cancelada")
    CREATED_FIELD = "date_reserved"
    CREATED_EVENT = "reservation_created"
    REQUIRED = ("book_id", "student_name")

    book_id: str = ""
    book_title: Optional[str] = None
    student_name: str = ""
    email: Optional[str] = None
    pickup_date: Optional[str] = None
    date_reserved: Optional[str] = None


@dataclass
class ParentMessage(Record):
    COLLECTION = "mensajes_padres"
    PREFIX = "MSG"
    STATUSES = ("enviado", "leido", "respondido")
    INITIAL_STATUS = "enviado"
    TERMINAL_STATUSES = ("respondido",)
    CREATED_FIELD = "date_sent"
    CREATED_EVENT = "message_sent"
    REQUIRED = ("parent_name", "message")

    parent_name: str = ""
    student_name: Optional[str] = None
    email: Optional[str] = None
    teacher: Optional[str] = None
    subject: Optional[str] = None
    message: str = ""
    date_sent: Optional[str] = None


@dataclass
class VisitorLog(Record):
    COLLECTION = "seguridad_visitas"
    PREFIX = "VISIT"
    STATUSES = ("active", "completed")
    INITIAL_STATUS = "active"
    TERMINAL_STATUSES = ("completed",)
    CREATED_FIELD = "check_in"
    CREATED_EVENT = "visitor_registered"
    REQUIRED = ("visitor_name", "purpose")
    MANAGED = Record.MANAGED + ("check_out",)

    visitor_name: str = ""
    visitor_id: Optional[str] = None
    purpose: str = ""
    person_to_visit: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None


@dataclass
class SecurityIncident(Record):
    COLLECTION = "seguridad_incidentes"
    PREFIX = "INC"
    STATUSES = ("investigating", "resolved")
    INITIAL_STATUS = "investigating"
    TERMINAL_STATUSES = ("resolved",)
    CREATED_FIELD = "date_reported"
    CREATED_EVENT = "incident_reported"
    REQUIRED = ("description",)

    incident_type: Optional[str] = None
    location: Optional[str] = None
    description: str = ""
    reported_by: Optional[str] = None
    severity: Optional[str] = None
    date_reported: Optional[str] = None


@dataclass
class NewsItem(Record):
    COLLECTION = "news"
    PREFIX = "NEWS"
    CREATED_FIELD = "date"
    CREATED_EVENT = "news_published"
    REQUIRED = ("title",)
    MANAGED = Record.MANAGED + ("active",)

    title: str = ""
    message: Optional[str] = None
    image_url: Optional[str] = None
    date: Optional[str] = None
    active: bool = True


RECORD_TYPES = (
    DocumentRequest,
    Enrollment,
    NurseVisit,
    SupportTicket,
    CounselingAppointment,
    EarlyAlert,
    BookReservation,
    ParentMessage,
    VisitorLog,
    SecurityIncident,
    NewsItem,
)

RECORD_TYPES_BY_COLLECTION = {record_type.COLLECTION: record_type for record_type in RECORD_TYPES}

# Colecciones reservadas por el esquema que todavía no tienen tipo propio
UNTYPED_COLLECTIONS = ("inventario_biblioteca", "usuarios")
