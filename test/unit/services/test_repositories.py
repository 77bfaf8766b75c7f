import re

import pytest

from servicios_escolares.exceptions import IdAllocationError, InvalidStatusError
from servicios_escolares.models import DocumentRequest, SupportTicket
from servicios_escolares.repositories import RecordRepository


def make_request(name="Ana Rivera"):
    return DocumentRequest.from_payload({"type": "certificacion", "studentName": name, "email": "ana@correo.com"})


def test_add_assigns_id_status_and_creation_stamp(store, notifier, fake_clock):
    """
    GIVEN a new document request
    WHEN it is added through the repository
    THEN it receives an id with its prefix, the initial status and the creation timestamp
    """
    repo = RecordRepository(store, notifier, clock=fake_clock("2025-09-01T10:00:00.000Z"))
    record = repo.add(make_request())

    assert re.fullmatch(r"DOC-\d{6}-\d{3}", record.id)
    assert record.status == "pendiente"
    assert record.request_date == "2025-09-01T10:00:00.000Z"
    assert record.last_update == record.request_date
    notifier.notify.assert_called_once_with(record, "created")


def test_add_uses_type_specific_event(store, notifier):
    repo = RecordRepository(store, notifier)
    ticket = repo.add(SupportTicket.from_payload({"description": "Sin internet en el salón 12"}))
    notifier.notify.assert_called_once_with(ticket, "ticket_created")


def test_colliding_id_is_drawn_again(store, notifier, sequence_random):
    """
    GIVEN a random source that repeats the same number
    WHEN two records are added to the same collection
    THEN the second one gets a different id
    """
    repo = RecordRepository(store, notifier, rng=sequence_random([5, 5, 9]))
    first = repo.add(make_request("Uno"))
    second = repo.add(make_request("Dos"))

    assert first.id.endswith("-005")
    assert second.id.endswith("-009")


def test_id_allocation_gives_up_after_repeated_collisions(store, notifier, sequence_random):
    repo = RecordRepository(store, notifier, rng=sequence_random([3]))
    repo.add(make_request("Uno"))

    with pytest.raises(IdAllocationError):
        repo.add(make_request("Dos"))


def test_same_number_is_allowed_in_different_collections(store, notifier, sequence_random):
    repo = RecordRepository(store, notifier, rng=sequence_random([42]))
    request = repo.add(make_request())
    ticket = repo.add(SupportTicket.from_payload({"description": "Pantalla rota"}))
    assert request.id.endswith("-042")
    assert ticket.id.endswith("-042")


def test_filter_keeps_insertion_order(store, notifier):
    repo = RecordRepository(store, notifier)
    names = ["Ana", "Beto", "Carla"]
    for name in names:
        repo.add(make_request(name))

    assert [r.student_name for r in repo.filter(DocumentRequest.COLLECTION)] == names


def test_update_status_unknown_id_returns_false(store, notifier):
    repo = RecordRepository(store, notifier)
    assert repo.update_status(DocumentRequest.COLLECTION, "DOC-000000-000", "completado") is False
    notifier.notify.assert_not_called()


def test_update_status_rejects_status_outside_type(store, notifier):
    repo = RecordRepository(store, notifier)
    record = repo.add(make_request())

    with pytest.raises(InvalidStatusError) as excinfo:
        repo.update_status(DocumentRequest.COLLECTION, record.id, "resuelto")
    assert "pendiente" in excinfo.value.allowed
    assert record.status == "pendiente"


def test_delete_reports_whether_something_was_removed(store, notifier):
    repo = RecordRepository(store, notifier)
    record = repo.add(make_request())

    assert repo.delete(DocumentRequest.COLLECTION, record.id) is True
    assert repo.delete(DocumentRequest.COLLECTION, record.id) is False
    assert repo.records(DocumentRequest.COLLECTION) == []
