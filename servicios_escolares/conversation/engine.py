# servicios_escolares/conversation/engine.py

import logging
import random
import re
from dataclasses import dataclass
from typing import Callable

from servicios_escolares.conversation import replies
from servicios_escolares.conversation.academic_calendar import (
    MONTH_ALTERNATION,
    describe_date,
    describe_month,
)

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"(?:\b|^)(?:el\s*)?(\d{1,2})\s*(?:de\s*)?(" + MONTH_ALTERNATION + r")\b")
MONTH_PATTERN = re.compile(r"\b(" + MONTH_ALTERNATION + r")\b")
MONTH_QUERY_KEYWORDS = re.compile(r"\b(qué|que hay|qué hay|evento|eventos|actividad|actividades|en)\b")

# Longitud máxima de una consulta que se interpreta como "solo el mes" (ej: "marzo?")
SHORT_QUERY_LENGTH = 12


class Query:
    """Texto del usuario junto con sus coincidencias de fecha y mes."""

    def __init__(self, text):
        self.text = text
        self.lowered = text.lower()
        self.date_match = DATE_PATTERN.search(self.lowered)
        self.month_match = MONTH_PATTERN.search(self.lowered)

    def has_any(self, words):
        return any(word in self.lowered for word in words)


@dataclass(frozen=True)
class IntentRule:
    name: str
    predicate: Callable
    reply: Callable

    def matches(self, query):
        return self.predicate(query)


# --- Constructores de predicados ---

def any_of(*words):
    return lambda query: query.has_any(words)


def all_of(*predicates):
    return lambda query: all(predicate(query) for predicate in predicates)


def either(*predicates):
    return lambda query: any(predicate(query) for predicate in predicates)


def month_bundle(month):
    return all_of(any_of(month), any_of("qué hay", "que hay", "evento", "actividad"))


# --- Constructores de respuestas ---

def fixed(text):
    return lambda engine, query: text


def pick(pool):
    return lambda engine, query: engine.rng.choice(pool)


# --- Reglas con lógica propia ---

def asks_specific_date(query):
    return query.date_match is not None


def reply_specific_date(engine, query):
    day = int(query.date_match.group(1))
    return describe_date(day, query.date_match.group(2))


def asks_month(query):
    """
    Un mes suelto solo se interpreta como consulta si el texto es corto, trae una
    palabra de consulta o dice literalmente 'en <mes>'.
    """
    if query.month_match is None:
        return False
    month = query.month_match.group(1)
    return (len(query.text.strip()) <= SHORT_QUERY_LENGTH
            or MONTH_QUERY_KEYWORDS.search(query.lowered) is not None
            or f"en {month}" in query.lowered)


def reply_month(engine, query):
    return describe_month(query.month_match.group(1))


def reply_greeting(engine, query):
    document = engine.store.document
    if document.first_greeting:
        document.first_greeting = False
        engine.store.save()
        return replies.FIRST_GREETING
    return engine.rng.choice(replies.GREETINGS)


# El orden es parte del comportamiento: gana la primera regla que coincide.
RULES = (
    IntentRule("specific_date", asks_specific_date, reply_specific_date),
    IntentRule("month", asks_month, reply_month),
    IntentRule("greeting", any_of("hola", "buenos", "buenas", "hey", "hi"), reply_greeting),
    IntentRule("farewell", any_of("adiós", "adios", "bye", "hasta luego", "nos vemos"), pick(replies.FAREWELLS)),
    IntentRule("thanks", any_of("gracias", "thank", "te lo agradezco", "muchas gracias"), pick(replies.THANKS)),
    # Navegación a servicios
    IntentRule("enrollment", any_of("matrícula", "matricula", "inscribirme", "inscripción"),
               fixed(replies.ENROLLMENT)),
    IntentRule("document_requests",
               all_of(any_of("solicitud", "solicitar"),
                      any_of("documento", "certificación", "transcripción", "record")),
               fixed(replies.DOCUMENT_REQUESTS)),
    IntentRule("tech_support",
               either(all_of(any_of("servicio"), any_of("técnico")), any_of("soporte técnico", "mantenimiento")),
               fixed(replies.TECH_SUPPORT)),
    IntentRule("nurse", any_of("enfermería", "enfermeria", "enfermero", "médico", "medico", "salud"),
               fixed(replies.NURSE)),
    IntentRule("counseling", any_of("orientación", "orientacion", "consejero", "psicólogo", "apoyo"),
               fixed(replies.COUNSELING)),
    IntentRule("library", any_of("biblioteca", "libro", "préstamo", "prestamo"), fixed(replies.LIBRARY)),
    IntentRule("cafeteria", any_of("comedor", "almuerzo", "comida", "desayuno"), fixed(replies.CAFETERIA)),
    IntentRule("parent_portal", all_of(any_of("portal"), any_of("padres", "familia", "padre")),
               fixed(replies.PARENT_PORTAL)),
    IntentRule("security", any_of("seguridad", "visita", "visitante", "incidente"), fixed(replies.SECURITY)),
    IntentRule("academic_evidence",
               all_of(any_of("dashboard", "evidencia", "seguimiento"), any_of("académico", "academic")),
               fixed(replies.ACADEMIC_EVIDENCE)),
    IntentRule("teacher_emails",
               all_of(any_of("correos"), any_of("maestro", "profesor", "teacher", "electrónico")),
               fixed(replies.TEACHER_EMAILS)),
    IntentRule("microsoft_teams", all_of(any_of("microsoft"), any_of("teams")), fixed(replies.MICROSOFT_TEAMS)),
    IntentRule("power_de", all_of(any_of("power"), any_of("de")), fixed(replies.POWER_DE)),
    IntentRule("igs_calculator", all_of(any_of("calcular"), any_of("igs", "índice", "indice", "promedio")),
               fixed(replies.IGS_CALCULATOR)),
    IntentRule("sports", any_of("deporte", "deportes", "athlet", "ejercicio"), fixed(replies.SPORTS)),
    # Capacidades e información general
    IntentRule("capabilities",
               any_of("qué puedes hacer", "que puedes hacer", "  ", "que haces", "para qué sirve",
                      "para que sirve", "cómo me ayudas", "como me ayudas", "qué sabes", "que sabes",
                      "qué servicios", "que servicios", "dime qué puedes", "dime que puedes"),
               fixed(replies.CAPABILITIES)),
    IntentRule("identity", any_of("qué es", "quien eres", "quién eres", "qué haces", "para qué"),
               fixed(replies.IDENTITY)),
    IntentRule("location", any_of("dónde está", "donde está", "ubicación", "dirección", "direccion"),
               fixed(replies.LOCATION)),
    IntentRule("contact", any_of("teléfono", "telefono", "llamar", "contacto", "correo"), fixed(replies.CONTACT)),
    IntentRule("schedule", any_of("horario", "hora", "cuando"), fixed(replies.SCHEDULE)),
    IntentRule("year_start",
               either(any_of("cuándo empieza", "cuando empieza"),
                      all_of(any_of("inicio"), any_of("clase", "curso", "año"))),
               fixed(replies.YEAR_START)),
    IntentRule("services",
               all_of(any_of("servicio"), any_of("qué", "cuales", "cuáles", "tienes", "ofrec")),
               fixed(replies.SERVICES)),
    # Estado y tiempos de las solicitudes
    IntentRule("request_status", all_of(any_of("estado"), any_of("solicitud", "ticket", "pedido")),
               fixed(replies.REQUEST_STATUS)),
    IntentRule("processing_time", all_of(any_of("cuánto"), any_of("tarda", "demora", "tiempo")),
               fixed(replies.PROCESSING_TIME)),
    IntentRule("help", any_of("ayuda", "help", "auxilio", "socorro"), fixed(replies.HELP)),
    IntentRule("confusion", any_of("no entiendo", "confundido", "perdido", "ayúdame", "ayudame"),
               fixed(replies.CONFUSION)),
    # Seguimiento de la conversación
    IntentRule("affirmative", any_of("sí", "si", "también", "tambien", "perfecto", "ok", "de acuerdo"),
               pick(replies.AFFIRMATIVE)),
    IntentRule("negative", all_of(any_of("no"), any_of("gracias", "nada", "otro")), pick(replies.NEGATIVE)),
    IntentRule("small_talk",
               any_of("cómo estás", "como estás", "qué tal", "que tal", "como te va", "qué onda", "que onda",
                      "qué pasa", "que pasa"),
               pick(replies.SMALL_TALK)),
    IntentRule("assistant_name", any_of("tu nombre", "cómo te llamas", "como te llamas"),
               fixed(replies.ASSISTANT_NAME)),
    IntentRule("weather", any_of("clima", "tiempo", "llover", "sol"), fixed(replies.WEATHER)),
    # Resúmenes del calendario escolar
    IntentRule("calendar", any_of("calendario", "fecha", "fechas importantes", "dates", "agenda"),
               fixed(replies.CALENDAR)),
    IntentRule("assessments", any_of("assessment", "evaluación", "evaluacion", "examen"), fixed(replies.ASSESSMENTS)),
    IntentRule("holidays", any_of("feriado", "día festivo", "dia festivo", "festivo", "libre"),
               fixed(replies.HOLIDAYS)),
    IntentRule("recess", any_of("receso", "descanso", "vacaciones"), fixed(replies.RECESS)),
    IntentRule("progress_reports", any_of("informe", "reporte", "progreso", "boleta", "notas"),
               fixed(replies.PROGRESS_REPORTS)),
    IntentRule("education_week", any_of("semana de la educación", "semana educativa", "educación"),
               fixed(replies.EDUCATION_WEEK)),
    IntentRule("finals", any_of("evaluación final", "evaluaciones finales", "examen final", "finales"),
               fixed(replies.FINALS)),
    IntentRule("february_events", month_bundle("febrero"), fixed(replies.FEBRUARY_EVENTS)),
    IntentRule("march_events", month_bundle("marzo"), fixed(replies.MARCH_EVENTS)),
    IntentRule("april_events", month_bundle("abril"), fixed(replies.APRIL_EVENTS)),
    IntentRule("may_events", month_bundle("mayo"), fixed(replies.MAY_EVENTS)),
)


class ConversationEngine:
    """
    Asistente conversacional basado en reglas. Evalúa las reglas en orden y
    responde con la primera que coincide; si ninguna coincide devuelve el
    mensaje por defecto.
    """

    def __init__(self, store, rng=None, rules=RULES):
        self.store = store
        self.rng = rng or random.Random()
        self.rules = rules

    def match(self, query):
        for rule in self.rules:
            if rule.matches(query):
                return rule
        return None

    def respond(self, text):
        query = Query(text or "")
        rule = self.match(query)
        if rule is None:
            logger.debug(f"Sin regla para la consulta: {text!r}")
            return replies.FALLBACK
        logger.debug(f"Consulta resuelta por la regla '{rule.name}'.")
        return rule.reply(self, query)
