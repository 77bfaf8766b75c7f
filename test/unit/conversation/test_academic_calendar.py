import pytest

from servicios_escolares.conversation.academic_calendar import (
    MONTHS,
    PointEvent,
    RangeEvent,
    describe_date,
    events_in_month,
    events_on,
    month_name,
)


def test_both_spellings_of_september():
    assert MONTHS["septiembre"] == MONTHS["setiembre"] == 9
    assert month_name(9) == "septiembre"


def test_month_name_rejects_invalid_number():
    with pytest.raises(ValueError):
        month_name(13)


def test_range_event_bounds_are_inclusive():
    event = RangeEvent(13, 4, 7, 5, "Assessment (período completo)")
    assert event.occurs_on(4, 13)
    assert event.occurs_on(5, 7)
    assert not event.occurs_on(4, 12)
    assert not event.occurs_on(5, 8)
    assert event.touches_month(4) and event.touches_month(5)
    assert not event.touches_month(6)


def test_point_event_labels():
    event = PointEvent(3, 4, "Feriado")
    assert event.date_label() == "Feriado"
    assert event.month_label("abril") == "• 3 de abril: Feriado"


def test_events_on_and_in_month_use_calendar_order():
    assert [e.title for e in events_on(26, 5)] == ["Evaluaciones finales"]
    assert [e.title for e in events_in_month(2)] == [
        "Reuniones profesionales de facultad y equipo (tarde)",
        "Día festivo",
        "Assessment",
    ]


def test_describe_date_with_custom_events():
    events = (PointEvent(1, 9, "Inicio de clases"),)
    assert describe_date(1, "setiembre", events) == "📅 El 1 de setiembre: Inicio de clases."
