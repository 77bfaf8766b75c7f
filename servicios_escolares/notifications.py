# servicios_escolares/notifications.py

import logging
import threading

from flask_mail import Message

logger = logging.getLogger(__name__)


def build_notification_message(record, event):
    """Arma el texto que recibiría el usuario para el evento indicado."""
    if event == "created":
        return f"Su solicitud {record.id} ha sido recibida. Le notificaremos cuando esté lista."
    if event == "updated":
        return f"Actualización de solicitud {record.id}: Su estado ahora es {(record.status or '').upper()}."
    return f"Registro {record.id}: evento '{event}' procesado."


def send_email_async(app, mail, msg):
    """Función auxiliar para enviar correos en un hilo separado."""
    with app.app_context():
        try:
            mail.send(msg)
            app.logger.info(f"Correo '{msg.subject}' enviado exitosamente a {msg.recipients}.")
        except Exception as e:
            app.logger.error(f"Error asíncrono al enviar correo '{msg.subject}' a {msg.recipients}: {str(e)}", exc_info=True)


class MailDispatcher:
    """Envía la notificación por correo usando Flask-Mail en segundo plano."""

    def __init__(self, app, mail):
        self.app = app
        self.mail = mail

    def __call__(self, recipient, subject, body):
        with self.app.app_context():
            msg = Message(subject,
                          sender=self.app.config.get("MAIL_DEFAULT_SENDER") or self.app.config.get("MAIL_USERNAME"),
                          recipients=[recipient])
            msg.body = body
        threading.Thread(target=send_email_async, args=(self.app, self.mail, msg), daemon=True).start()
        self.app.logger.debug(f"Email '{subject}' en cola para: {recipient}")


class NotificationSimulator:
    """
    Punto de extensión para notificaciones (Email/WhatsApp).
    Se invoca una vez por cada creación o cambio de estado y nunca hace fallar
    la operación que lo llamó. Sin despachador configurado solo registra el
    mensaje en el log.
    """

    def __init__(self, dispatcher=None):
        self.dispatcher = dispatcher

    def notify(self, record, event):
        try:
            message = build_notification_message(record, event)
            logger.info(f"NOTIFICACIÓN [{event}] {record.id}: {message}")
            recipient = getattr(record, "email", None)
            if self.dispatcher and recipient:
                self.dispatcher(recipient, f"Notificación {record.id}", message)
            return message
        except Exception as e:
            logger.error(f"Error al procesar la notificación '{event}' de {getattr(record, 'id', '?')}: {e}", exc_info=True)
            return None
