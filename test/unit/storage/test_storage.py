import json
from unittest.mock import Mock, patch

import mongomock
import pymongo
import pytest

from servicios_escolares.exceptions import MalformedDocumentError, StorageWriteError
from servicios_escolares.models import (
    RECORD_TYPES,
    UNTYPED_COLLECTIONS,
    Comment,
    DocumentRequest,
    SupportTicket,
    WorkLog,
)
from servicios_escolares.storage import (
    JSONFileStorage,
    MongoStorage,
    PersistentStore,
    StoreDocument,
    deserialize,
    serialize,
)


def test_fresh_document_has_every_collection(store):
    """
    GIVEN a store whose file does not exist yet
    WHEN the document is loaded
    THEN every collection exists and is empty, and the defaults are in place
    """
    document = store.load()
    for record_type in RECORD_TYPES:
        assert document.collection(record_type.COLLECTION) == []
    for name in UNTYPED_COLLECTIONS:
        assert document.collection(name) == []
    assert document.first_greeting is True
    assert document.tech_scores == {}
    assert document.config == {"schoolName": "Escuela Superior Vocacional", "academicYear": "2025-2026"}


def test_store_config_overrides_defaults(store_path):
    store = PersistentStore(JSONFileStorage(store_path), config={"schoolName": "Escuela PCB"})
    assert store.document.config["schoolName"] == "Escuela PCB"
    assert store.document.config["academicYear"] == "2025-2026"


def test_saved_document_survives_reload(services, store_path):
    """
    GIVEN a document request created through the services layer
    WHEN a new store is opened on the same file
    THEN the request is loaded back with the same values
    """
    created = services.create_document_request(
        {"type": "certificacion", "studentName": "Ana Rivera", "email": "ana@correo.com"})

    reopened = PersistentStore(JSONFileStorage(store_path))
    loaded = reopened.document.collection(DocumentRequest.COLLECTION)

    assert len(loaded) == 1
    assert isinstance(loaded[0], DocumentRequest)
    assert loaded[0].to_dict() == created.to_dict()


def test_persisted_file_uses_camel_case_keys(services, store_path):
    services.create_document_request({"type": "certificacion", "studentName": "Ana", "email": "ana@correo.com"})
    with open(store_path, encoding="utf-8") as fh:
        raw = json.load(fh)

    stored = raw["solicitudes_documentos"][0]
    assert "studentName" in stored
    assert "requestDate" in stored
    assert raw["firstGreeting"] is True
    assert raw["techScores"] == {}


def test_missing_collection_is_created_lazily(store_path):
    with open(store_path, "w", encoding="utf-8") as fh:
        json.dump({"news": [], "config": {"schoolName": "X", "academicYear": "2024-2025"}}, fh)

    store = PersistentStore(JSONFileStorage(store_path))
    assert store.document.collection("matriculas") == []
    assert store.document.config["schoolName"] == "X"


def test_malformed_json_is_replaced_with_fresh_document(store_path, caplog):
    """
    GIVEN a persisted file that is not valid JSON
    WHEN the store loads it
    THEN an error is logged and a fresh document is used instead of failing
    """
    with open(store_path, "w", encoding="utf-8") as fh:
        fh.write("{esto no es json")

    store = PersistentStore(JSONFileStorage(store_path))
    document = store.load()

    assert document.collection(DocumentRequest.COLLECTION) == []
    assert "Documento persistido inválido" in caplog.text


def test_collection_with_wrong_shape_is_malformed(store_path):
    with open(store_path, "w", encoding="utf-8") as fh:
        json.dump({"matriculas": "no es una lista"}, fh)

    store = PersistentStore(JSONFileStorage(store_path))
    assert store.load().collection("matriculas") == []


def test_unknown_top_level_keys_are_preserved():
    document = StoreDocument.from_dict({"futuro": {"a": 1}, "firstGreeting": False})
    data = document.to_dict()
    assert data["futuro"] == {"a": 1}
    assert data["firstGreeting"] is False


def test_deserialize_rejects_invalid_text():
    with pytest.raises(MalformedDocumentError):
        deserialize("[1, 2")


def test_serialize_then_deserialize_keeps_tech_scores():
    document = StoreDocument(tech_scores={"Luis": 4})
    assert deserialize(serialize(document)).tech_scores == {"Luis": 4}


def test_write_failure_raises_storage_write_error(tmp_path):
    blocker = tmp_path / "bloqueo"
    blocker.write_text("archivo")
    backend = JSONFileStorage(str(blocker / "store.json"))

    with pytest.raises(StorageWriteError):
        backend.write({"news": []})


def test_mongo_storage_round_trip():
    """
    GIVEN a MongoDB collection (mongomock)
    WHEN the whole document is written and read back
    THEN it is stored as a single document under the storage key
    """
    collection = mongomock.MongoClient().db.servicios
    backend = MongoStorage(collection, "pcb_school_services_data")
    store = PersistentStore(backend)

    store.document.tech_scores["Marta"] = 5
    store.save()

    assert collection.count_documents({}) == 1
    reopened = PersistentStore(MongoStorage(collection, "pcb_school_services_data"))
    assert reopened.document.tech_scores == {"Marta": 5}


def test_mongo_storage_missing_document_reads_none():
    backend = MongoStorage(mongomock.MongoClient().db.servicios, "otra_clave")
    assert backend.read() is None


def test_mongo_write_error_is_wrapped():
    collection = Mock()
    collection.replace_one.side_effect = pymongo.errors.PyMongoError("sin conexión")
    backend = MongoStorage(collection, "clave")

    with pytest.raises(StorageWriteError) as excinfo:
        backend.write({})
    assert isinstance(excinfo.value.original_exception, pymongo.errors.PyMongoError)


def test_reset_discards_existing_records(services, store):
    services.create_ticket({"description": "Proyector dañado"})
    store.reset()
    assert store.document.collection("tickets_soporte") == []


def test_serialize_then_deserialize_keeps_nested_records():
    """
    GIVEN records with comment history and work logs
    WHEN the document is serialized and read back
    THEN the sub-documents come back as typed objects with the same values
    """
    request = DocumentRequest.from_dict({
        "id": "DOC-250901-001", "status": "en_proceso", "type": "certificacion",
        "studentName": "Ana", "email": "ana@correo.com",
        "comments": [{"text": "Recibido", "date": "2025-09-02T11:30:00.000Z", "author": "Administrador"}]})
    ticket = SupportTicket.from_dict({
        "id": "TICK-250901-002", "status": "abierto", "description": "Impresora",
        "logs": [{"studentName": "Luis", "hours": 1.5, "description": "Rodillos",
                  "date": "2025-09-03T08:00:00.000Z", "evidenceUrl": "http://foto"}]})
    document = StoreDocument(collections={DocumentRequest.COLLECTION: [request],
                                          SupportTicket.COLLECTION: [ticket]})

    restored = deserialize(serialize(document))

    restored_request = restored.collection(DocumentRequest.COLLECTION)[0]
    restored_ticket = restored.collection(SupportTicket.COLLECTION)[0]
    assert restored_request == request
    assert isinstance(restored_request.comments[0], Comment)
    assert restored_ticket == ticket
    assert isinstance(restored_ticket.logs[0], WorkLog)
    assert restored_ticket.logs[0].evidence_url == "http://foto"


def test_failed_write_leaves_no_temporary_file(tmp_path):
    backend = JSONFileStorage(str(tmp_path / "store.json"))

    with patch('servicios_escolares.storage.os.replace', side_effect=OSError("disco lleno")):
        with pytest.raises(StorageWriteError):
            backend.write({"news": []})

    assert list(tmp_path.iterdir()) == []


def test_failed_save_restores_last_saved_document(services, store):
    """
    GIVEN a stored document request and a backend that stops accepting writes
    WHEN a new request is created and the existing one changes status
    THEN both calls fail and the in-memory document matches the last successful save
    """
    existing = services.create_document_request(
        {"type": "certificacion", "studentName": "Ana", "email": "ana@correo.com"})
    store.backend.write = Mock(side_effect=StorageWriteError())

    with pytest.raises(StorageWriteError):
        services.create_document_request({"type": "transcripcion", "studentName": "Beto", "email": "b@correo.com"})
    assert [r.id for r in services.get_requests()] == [existing.id]

    with pytest.raises(StorageWriteError):
        services.update_request_status(existing.id, "completado", "nota")
    reloaded = services.get_request_by_id(existing.id)
    assert reloaded.status == "pendiente"
    assert reloaded.comments == []


def test_failed_save_on_first_write_restores_loaded_document(store):
    store.backend.write = Mock(side_effect=StorageWriteError())
    store.document.tech_scores["Marta"] = 5

    with pytest.raises(StorageWriteError):
        store.save()

    assert store.document.tech_scores == {}
