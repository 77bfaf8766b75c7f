from datetime import datetime, timezone
import random
import re

from servicios_escolares.utils import generate_id, parse_iso, to_iso


def test_generate_id_format():
    """
    GIVEN a prefix and a fixed date
    WHEN an identifier is generated
    THEN it has the form PREFIX-YYMMDD-NNN with a zero-padded random part
    """
    now = datetime(2025, 3, 5, 14, 30, tzinfo=timezone.utc)
    generated = generate_id("DOC", now=now, rng=random.Random(1))
    assert re.fullmatch(r"DOC-250305-\d{3}", generated)


def test_generate_id_pads_small_numbers(sequence_random):
    now = datetime(2026, 1, 9, tzinfo=timezone.utc)
    assert generate_id("TICK", now=now, rng=sequence_random([7])) == "TICK-260109-007"


def test_to_iso_uses_milliseconds_and_z_suffix():
    moment = datetime(2025, 8, 12, 9, 5, 3, 123456, tzinfo=timezone.utc)
    assert to_iso(moment) == "2025-08-12T09:05:03.123Z"


def test_parse_iso_accepts_z_suffix_and_naive_values():
    assert parse_iso("2025-08-12T09:05:03.123Z") == datetime(2025, 8, 12, 9, 5, 3, 123000, tzinfo=timezone.utc)
    assert parse_iso("2025-08-12T09:05:03").tzinfo == timezone.utc
