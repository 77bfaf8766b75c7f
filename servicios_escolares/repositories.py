import logging

from servicios_escolares.exceptions import IdAllocationError, InvalidStatusError
from servicios_escolares.models import Comment
from servicios_escolares.utils import generate_id, now_iso

logger = logging.getLogger(__name__)

MAX_ID_ATTEMPTS = 50


class RecordRepository:
    """
    Operaciones genéricas sobre las colecciones del documento del almacén.
    Cada mutación se persiste de inmediato y se notifica al simulador.
    """

    def __init__(self, store, notifier, clock=now_iso, rng=None):
        self.store = store
        self.notifier = notifier
        self.clock = clock
        self.rng = rng

    def records(self, collection):
        return self.store.document.collection(collection)

    def allocate_id(self, collection, prefix):
        taken = {record.id for record in self.records(collection)}
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = generate_id(prefix, rng=self.rng)
            if candidate not in taken:
                return candidate
            logger.debug(f"ID {candidate} repetido en '{collection}', se genera otro.")
        raise IdAllocationError(f"No se pudo generar un ID libre para '{collection}'.")

    def add(self, record, event=None):
        """
        Asigna ID, sella la creación, fija el estado inicial, agrega el registro a
        su colección, persiste y notifica.
        """
        collection = record.COLLECTION
        timestamp = self.clock()
        record.id = self.allocate_id(collection, record.PREFIX)
        record.status = record.INITIAL_STATUS
        record.stamp_created(timestamp)
        self.records(collection).append(record)
        self.store.save()
        logger.info(f"Registro {record.id} creado en '{collection}'.")

        event = event or record.CREATED_EVENT
        if event:
            self.notifier.notify(record, event)
        return record

    def find_by_id(self, collection, record_id):
        for record in self.records(collection):
            if record.id == record_id:
                return record
        return None

    def filter(self, collection, predicate=None, status=None):
        """Devuelve los registros (objetos vivos) que cumplen el filtro, en orden de inserción."""
        result = []
        for record in self.records(collection):
            if status is not None and record.status != status:
                continue
            if predicate is not None and not predicate(record):
                continue
            result.append(record)
        return result

    def update_status(self, collection, record_id, new_status, comment=None, author="Administrador"):
        record = self.find_by_id(collection, record_id)
        if record is None:
            logger.info(f"No se encontró el registro {record_id} en '{collection}'.")
            return False
        if new_status not in record.STATUSES:
            raise InvalidStatusError(new_status, record.STATUSES)

        timestamp = self.clock()
        record.status = new_status
        record.last_update = timestamp
        if comment:
            if hasattr(record, "comments"):
                record.comments.append(Comment(text=comment, date=timestamp, author=author))
            else:
                logger.warning(f"El registro {record_id} no admite comentarios; se descarta la nota.")
        self.store.save()
        self.notifier.notify(record, "updated")
        return True

    def replace(self, collection, record):
        records = self.records(collection)
        for index, current in enumerate(records):
            if current.id == record.id:
                records[index] = record
                self.store.save()
                return True
        return False

    def delete(self, collection, record_id):
        records = self.records(collection)
        remaining = [record for record in records if record.id != record_id]
        removed = len(remaining) != len(records)
        records[:] = remaining
        self.store.save()
        return removed

    def commit(self):
        self.store.save()
