# servicios_escolares/utils.py

import logging
import random
from datetime import datetime, timezone

from flask import jsonify, request

logger = logging.getLogger(__name__)


def utc_now():
    return datetime.now(timezone.utc)


def to_iso(moment):
    """Serializa un datetime al formato ISO-8601 con milisegundos y sufijo Z."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def parse_iso(value):
    """Convierte una marca de tiempo ISO-8601 (con o sin 'Z') en datetime con zona UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def now_iso():
    return to_iso(utc_now())


def generate_id(prefix, now=None, rng=None):
    """
    Genera un identificador legible con la forma <PREFIJO>-<AAMMDD>-<NNN>.
    La parte aleatoria se toma de forma uniforme en [0, 1000); no es
    criptográficamente única y las colisiones se resuelven en el registro.
    """
    now = now or utc_now()
    rng = rng or random
    date_part = now.astimezone(timezone.utc).strftime("%y%m%d")
    random_part = str(rng.randrange(1000)).zfill(3)
    return f"{prefix}-{date_part}-{random_part}"


def request_payload():
    """Datos del cuerpo de la petición, ya sea JSON o un formulario."""
    return request.get_json(silent=True) or request.form.to_dict()


def form_errors_response(form):
    logger.warning(f"Datos inválidos en {request.path}: {form.errors}")
    return jsonify({"errors": form.errors}), 400
