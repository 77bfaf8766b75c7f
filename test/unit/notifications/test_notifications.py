from unittest.mock import Mock, patch

from servicios_escolares import mail
from servicios_escolares.models import DocumentRequest, SupportTicket
from servicios_escolares.notifications import (
    MailDispatcher,
    NotificationSimulator,
    build_notification_message,
)


def make_request(**values):
    return DocumentRequest(id="DOC-250901-123", status="pendiente", email="ana@correo.com", **values)


def test_created_message():
    message = build_notification_message(make_request(), "created")
    assert message == "Su solicitud DOC-250901-123 ha sido recibida. Le notificaremos cuando esté lista."


def test_updated_message_uses_uppercase_status():
    record = make_request()
    record.status = "en_proceso"
    message = build_notification_message(record, "updated")
    assert message == "Actualización de solicitud DOC-250901-123: Su estado ahora es EN_PROCESO."


def test_other_events_use_generic_message():
    ticket = SupportTicket(id="TICK-250901-001", status="abierto")
    assert build_notification_message(ticket, "ticket_created") == \
        "Registro TICK-250901-001: evento 'ticket_created' procesado."


def test_notify_logs_without_dispatcher(caplog):
    """
    GIVEN a notification simulator without an email dispatcher
    WHEN a record is notified
    THEN the message is only written to the log
    """
    caplog.set_level("INFO", logger="servicios_escolares.notifications")
    message = NotificationSimulator().notify(make_request(), "created")

    assert message.startswith("Su solicitud DOC-250901-123")
    assert "NOTIFICACIÓN [created] DOC-250901-123" in caplog.text


def test_notify_dispatches_to_record_email():
    dispatcher = Mock()
    NotificationSimulator(dispatcher=dispatcher).notify(make_request(), "created")

    dispatcher.assert_called_once()
    recipient, subject, body = dispatcher.call_args.args
    assert recipient == "ana@correo.com"
    assert subject == "Notificación DOC-250901-123"
    assert "ha sido recibida" in body


def test_notify_skips_dispatch_without_email():
    dispatcher = Mock()
    NotificationSimulator(dispatcher=dispatcher).notify(SupportTicket(id="TICK-1", status="abierto"), "updated")
    dispatcher.assert_not_called()


def test_notify_never_raises(caplog):
    """
    GIVEN a dispatcher that fails
    WHEN a record is notified
    THEN the error is logged and the caller is not interrupted
    """
    dispatcher = Mock(side_effect=RuntimeError("SMTP caído"))
    result = NotificationSimulator(dispatcher=dispatcher).notify(make_request(), "created")

    assert result is None
    assert "SMTP caído" in caplog.text


@patch('servicios_escolares.notifications.threading.Thread')
def test_mail_dispatcher_sends_in_background(mock_thread, app):
    app.config['MAIL_DEFAULT_SENDER'] = "no-reply@escuela.pr"
    MailDispatcher(app, mail)("ana@correo.com", "Asunto", "Cuerpo")

    mock_thread.assert_called_once()
    _, msg = mock_thread.call_args.kwargs['args'][1:]
    assert msg.recipients == ["ana@correo.com"]
    assert msg.body == "Cuerpo"
    mock_thread.return_value.start.assert_called_once()
