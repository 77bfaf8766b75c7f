from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional

from servicios_escolares.forms import JSONForm


class NewsForm(JSONForm):
    title = StringField('Título', validators=[DataRequired(message="Este campo es obligatorio"), Length(max=150)])
    message = TextAreaField('Mensaje', validators=[Optional(), Length(max=2000)])
    imageUrl = StringField('Imagen', validators=[Optional()])
