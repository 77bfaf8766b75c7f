# servicios_escolares/storage.py

import json
import logging
import os
import tempfile

import pymongo

from servicios_escolares.exceptions import (
    InvalidPayloadError,
    MalformedDocumentError,
    StorageError,
    StorageWriteError,
)
from servicios_escolares.models import RECORD_TYPES_BY_COLLECTION, UNTYPED_COLLECTIONS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "schoolName": "Escuela Superior Vocacional",
    "academicYear": "2025-2026",
}

_RESERVED_KEYS = {"techScores", "config", "firstGreeting"}


class StoreDocument:
    """
    Documento raíz del almacén: todas las colecciones, la configuración de la
    escuela, las puntuaciones de técnicos y la bandera del primer saludo.
    """

    def __init__(self, collections=None, config=None, tech_scores=None, first_greeting=True, other=None):
        self.collections = collections or {}
        self.config = dict(DEFAULT_CONFIG)
        self.config.update(config or {})
        self.tech_scores = tech_scores or {}
        self.first_greeting = first_greeting
        # Claves desconocidas de versiones futuras; se conservan al guardar
        self.other = other or {}
        for name in RECORD_TYPES_BY_COLLECTION:
            self.collections.setdefault(name, [])
        for name in UNTYPED_COLLECTIONS:
            self.collections.setdefault(name, [])

    def collection(self, name):
        """Devuelve la colección indicada, creándola vacía si no existe."""
        return self.collections.setdefault(name, [])

    def to_dict(self):
        data = {}
        for name, records in self.collections.items():
            data[name] = [r.to_dict() if hasattr(r, "to_dict") else r for r in records]
        data.update(self.other)
        data["techScores"] = dict(self.tech_scores)
        data["config"] = dict(self.config)
        data["firstGreeting"] = self.first_greeting
        return data

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise MalformedDocumentError("La raíz del documento no es un objeto.")

        collections = {}
        other = {}
        for key, value in data.items():
            if key in _RESERVED_KEYS:
                continue
            record_type = RECORD_TYPES_BY_COLLECTION.get(key)
            if record_type is None and key not in UNTYPED_COLLECTIONS:
                other[key] = value
                continue
            if not isinstance(value, list):
                raise MalformedDocumentError(f"La colección '{key}' no es una lista.")
            if record_type is None:
                collections[key] = list(value)
                continue
            try:
                collections[key] = [record_type.from_dict(item) for item in value]
            except (InvalidPayloadError, TypeError, ValueError) as e:
                raise MalformedDocumentError(
                    f"Registro inválido en la colección '{key}'.", original_exception=e)

        tech_scores = data.get("techScores", {})
        if not isinstance(tech_scores, dict):
            raise MalformedDocumentError("'techScores' no es un objeto.")
        config = data.get("config", {})
        if not isinstance(config, dict):
            raise MalformedDocumentError("'config' no es un objeto.")
        first_greeting = data.get("firstGreeting", True)
        if not isinstance(first_greeting, bool):
            raise MalformedDocumentError("'firstGreeting' no es booleano.")

        return cls(collections=collections, config=config, tech_scores=dict(tech_scores),
                   first_greeting=first_greeting, other=other)


def serialize(document):
    return json.dumps(document.to_dict(), ensure_ascii=False)


def deserialize(text):
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedDocumentError("El documento almacenado no es JSON válido.", original_exception=e)
    return StoreDocument.from_dict(data)


# -----------------------------------------------
# INTERFAZ DE ALMACENAMIENTO
# -----------------------------------------------

class StorageBackend:
    """Define el contrato de lectura/escritura del documento completo."""
    def read(self):
        """Devuelve el documento crudo (dict) o None si aún no existe."""
        raise NotImplementedError

    def write(self, data):
        raise NotImplementedError

# -----------------------------------------------
# IMPLEMENTACIONES
# -----------------------------------------------

class JSONFileStorage(StorageBackend):
    """Guarda el documento como un único archivo JSON local."""
    def __init__(self, path):
        self.path = path

    def read(self):
        try:
            with open(self.path, encoding="utf-8") as fh:
                text = fh.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"No se pudo leer {self.path}.", original_exception=e)
        try:
            return json.loads(text)
        except ValueError as e:
            raise MalformedDocumentError("El documento almacenado no es JSON válido.", original_exception=e)

    def write(self, data):
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageWriteError(f"No se pudo escribir {self.path}.", original_exception=e)


class MongoStorage(StorageBackend):
    """
    Guarda el documento completo como un solo documento de MongoDB,
    identificado por la clave de almacenamiento.
    """
    def __init__(self, collection, key):
        self.collection = collection
        self.key = key

    def read(self):
        try:
            stored = self.collection.find_one({"_id": self.key})
        except pymongo.errors.PyMongoError as e:
            raise StorageError("No se pudo leer el documento de MongoDB.", original_exception=e)
        if stored is None:
            return None
        return stored.get("data")

    def write(self, data):
        try:
            self.collection.replace_one({"_id": self.key}, {"_id": self.key, "data": data}, upsert=True)
        except pymongo.errors.PyMongoError as e:
            raise StorageWriteError("No se pudo guardar el documento en MongoDB.", original_exception=e)


class PersistentStore:
    """
    Frontera de durabilidad: mantiene el documento en memoria y lo reescribe
    completo después de cada mutación. Si la escritura falla, el documento en
    memoria vuelve al último estado persistido.
    """

    def __init__(self, backend, config=None):
        self.backend = backend
        self.default_config = config or {}
        self._document = None
        self._snapshot = None

    def fresh_document(self):
        return StoreDocument(config=self.default_config)

    def load(self):
        try:
            raw = self.backend.read()
            document = self.fresh_document() if raw is None else StoreDocument.from_dict(raw)
        except MalformedDocumentError as e:
            logger.error(f"Documento persistido inválido, se inicializa uno nuevo: {e}", exc_info=True)
            document = self.fresh_document()
        self._document = document
        self._snapshot = serialize(document)
        return document

    @property
    def document(self):
        if self._document is None:
            self.load()
        return self._document

    def save(self):
        data = self.document.to_dict()
        try:
            self.backend.write(data)
        except StorageError:
            logger.warning("Fallo al guardar; se descartan los cambios en memoria.")
            self.rollback()
            raise
        self._snapshot = json.dumps(data, ensure_ascii=False)
        logger.debug("Documento de servicios guardado.")

    def rollback(self):
        """Restaura el documento en memoria al último estado leído o guardado."""
        if self._snapshot is None:
            self._document = self.fresh_document()
        else:
            self._document = deserialize(self._snapshot)
        return self._document

    def reset(self):
        """Descarta el contenido actual y persiste un documento vacío."""
        self._document = self.fresh_document()
        self.save()
        return self._document
