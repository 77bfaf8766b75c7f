from flask_wtf import FlaskForm


class JSONForm(FlaskForm):
    """
    Formulario base para la API. Los datos llegan como JSON desde la capa de
    presentación, así que no se exige el token CSRF.
    """
    class Meta:
        csrf = False
