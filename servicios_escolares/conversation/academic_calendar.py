# servicios_escolares/conversation/academic_calendar.py

"""
Calendario escolar 2025-2026 y las dos formas de consultarlo:
por fecha exacta (día y mes) y por mes completo.
"""

from dataclasses import dataclass

MONTHS = {
    "enero": 1, "febrero": 2, "marzo": 3, "abril": 4, "mayo": 5, "junio": 6,
    "julio": 7, "agosto": 8, "septiembre": 9, "setiembre": 9, "octubre": 10,
    "noviembre": 11, "diciembre": 12,
}

MONTH_ALTERNATION = "|".join(MONTHS)


def month_name(number):
    """Primer nombre registrado para el número de mes ('septiembre' antes que 'setiembre')."""
    for name, value in MONTHS.items():
        if value == number:
            return name
    raise ValueError(f"Mes inválido: {number}")


@dataclass(frozen=True)
class PointEvent:
    """Evento de un solo día."""
    day: int
    month: int
    title: str

    def occurs_on(self, month, day):
        return self.month == month and self.day == day

    def touches_month(self, month):
        return self.month == month

    def date_label(self):
        return self.title

    def month_label(self, queried_month_name):
        return f"• {self.day} de {queried_month_name}: {self.title}"


@dataclass(frozen=True)
class RangeEvent:
    """Evento que abarca un intervalo inclusivo de días; nunca cruza de año."""
    start_day: int
    start_month: int
    end_day: int
    end_month: int
    title: str

    def occurs_on(self, month, day):
        after_start = month > self.start_month or (month == self.start_month and day >= self.start_day)
        before_end = month < self.end_month or (month == self.end_month and day <= self.end_day)
        return after_start and before_end

    def touches_month(self, month):
        # Solo compara meses; el día no se tiene en cuenta a este nivel
        return (self.start_month < month < self.end_month) or month == self.start_month or month == self.end_month

    @property
    def span(self):
        return (f"del {self.start_day} de {month_name(self.start_month)} "
                f"al {self.end_day} de {month_name(self.end_month)}")

    def date_label(self):
        return f"{self.title} ({self.span})"

    def month_label(self, queried_month_name):
        return f"• {self.title} ({self.span})"


CALENDAR_EVENTS = (
    PointEvent(13, 2, "Reuniones profesionales de facultad y equipo (tarde)"),
    PointEvent(16, 2, "Día festivo"),
    PointEvent(19, 2, "Assessment"),
    PointEvent(2, 3, "Día festivo"),
    PointEvent(16, 3, "Assessment"),
    PointEvent(20, 3, "Reuniones profesionales (tarde)"),
    PointEvent(23, 3, "Día festivo"),
    PointEvent(27, 3, "Entrega del informe de progreso académico"),
    PointEvent(2, 4, "Receso académico (personal docente y no docente)"),
    PointEvent(3, 4, "Feriado"),
    RangeEvent(13, 4, 7, 5, "Assessment (período completo)"),
    RangeEvent(18, 5, 22, 5, "Semana de la Educación"),
    PointEvent(22, 5, "Receso académico"),
    PointEvent(25, 5, "Feriado"),
    PointEvent(26, 5, "Evaluaciones finales"),
    PointEvent(27, 5, "Evaluaciones finales"),
    PointEvent(29, 5, "Entrega del informe de progreso académico"),
)


def events_on(day, month, events=CALENDAR_EVENTS):
    return [event for event in events if event.occurs_on(month, day)]


def events_in_month(month, events=CALENDAR_EVENTS):
    return [event for event in events if event.touches_month(month)]


def describe_date(day, queried_month_name, events=CALENDAR_EVENTS):
    matches = events_on(day, MONTHS[queried_month_name], events)
    if matches:
        return f"📅 El {day} de {queried_month_name}: {'; '.join(e.date_label() for e in matches)}."
    return (f"📅 No hay eventos listados para el {day} de {queried_month_name} en el calendario escolar. "
            "¿Deseas ver el calendario completo?")


def describe_month(queried_month_name, events=CALENDAR_EVENTS):
    matches = events_in_month(MONTHS[queried_month_name], events)
    if matches:
        header = f"📅 <strong>Eventos de {queried_month_name.capitalize()}</strong>:<br><br>"
        return header + "<br>".join(e.month_label(queried_month_name) for e in matches)
    return f"📅 No se encontraron eventos listados para {queried_month_name}. ¿Quieres ver el calendario completo?"
