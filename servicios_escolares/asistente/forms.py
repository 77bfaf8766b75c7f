from wtforms import StringField
from wtforms.validators import DataRequired, Length

from servicios_escolares.forms import JSONForm


class MessageForm(JSONForm):
    mensaje = StringField('Mensaje', validators=[DataRequired(message="Este campo es obligatorio"), Length(max=500)])
