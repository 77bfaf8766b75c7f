from wtforms import BooleanField, FloatField, IntegerField, StringField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, NumberRange, Optional

from servicios_escolares.forms import JSONForm

REQUIRED = "Este campo es obligatorio"


class DocumentRequestForm(JSONForm):
    type = StringField('Tipo de documento', validators=[DataRequired(message=REQUIRED)])
    studentName = StringField('Nombre del estudiante', validators=[DataRequired(message=REQUIRED), Length(max=100)])
    email = StringField('Correo Electrónico', validators=[DataRequired(message=REQUIRED), Email()])


class StatusUpdateForm(JSONForm):
    status = StringField('Estado', validators=[DataRequired(message=REQUIRED)])
    comment = TextAreaField('Comentario', validators=[Optional(), Length(max=500)])


class EnrollmentForm(JSONForm):
    studentName = StringField('Nombre del estudiante', validators=[DataRequired(message=REQUIRED), Length(max=100)])
    grade = StringField('Grado', validators=[DataRequired(message=REQUIRED)])


class StudentReasonForm(JSONForm):
    """Visitas de enfermería, citas de orientación y alertas tempranas."""
    studentName = StringField('Nombre del estudiante', validators=[DataRequired(message=REQUIRED), Length(max=100)])
    reason = StringField('Motivo', validators=[DataRequired(message=REQUIRED), Length(max=500)])


class TicketForm(JSONForm):
    description = TextAreaField('Descripción del problema', validators=[DataRequired(message=REQUIRED), Length(max=1000)])


class WorkLogForm(JSONForm):
    studentName = StringField('Estudiante técnico', validators=[DataRequired(message=REQUIRED)])
    hours = FloatField('Horas', validators=[NumberRange(min=0.25, max=24, message="Las horas deben estar entre 0.25 y 24")])
    description = TextAreaField('Trabajo realizado', validators=[DataRequired(message=REQUIRED), Length(max=500)])
    evidenceUrl = StringField('Evidencia', validators=[Optional()])
    markCompleted = BooleanField('Marcar como completado')


class ResolveTicketForm(JSONForm):
    techName = StringField('Técnico', validators=[DataRequired(message=REQUIRED)])


class TechScoreForm(JSONForm):
    score = IntegerField('Puntuación', validators=[NumberRange(min=0, message="La puntuación debe ser un número positivo")])


class BookReservationForm(JSONForm):
    bookId = StringField('Libro', validators=[DataRequired(message=REQUIRED)])
    studentName = StringField('Nombre del estudiante', validators=[DataRequired(message=REQUIRED), Length(max=100)])


class ParentMessageForm(JSONForm):
    parentName = StringField('Nombre del padre o encargado', validators=[DataRequired(message=REQUIRED)])
    message = TextAreaField('Mensaje', validators=[DataRequired(message=REQUIRED), Length(max=1000)])


class VisitorForm(JSONForm):
    visitorName = StringField('Nombre del visitante', validators=[DataRequired(message=REQUIRED)])
    purpose = StringField('Propósito de la visita', validators=[DataRequired(message=REQUIRED)])


class IncidentForm(JSONForm):
    description = TextAreaField('Descripción del incidente', validators=[DataRequired(message=REQUIRED), Length(max=1000)])
