import pytest

from app.core.exceptions import ReferenceNotFound, ValidationError
from app.services.workshop_refs import normalize_workshop_id, parse_workshop_id


@pytest.mark.parametrize(
    "raw, expected",
    [
        (3, 3),
        ("3", 3),
        (" 12 ", 12),
        (4.0, 4),
        (None, None),
        ("", None),
        ("   ", None),
        ("abc", None),
        ("1.5", None),
        (2.5, None),
        (0, None),
        (-7, None),
        ("-7", None),
        (True, None),
        ([1], None),
        (2 ** 31 - 1, 2 ** 31 - 1),
        (2 ** 31, None),
        ("99999999999999999999", None),
    ],
)
def test_parse_workshop_id(raw, expected):
    assert parse_workshop_id(raw) == expected


def test_existing_id_is_idempotent(db, workshop):
    once = normalize_workshop_id(db, str(workshop.id), required=True)
    twice = normalize_workshop_id(db, once, required=True)

    assert once == workshop.id
    assert twice == once
    assert normalize_workshop_id(db, workshop.id, required=False) == workshop.id


@pytest.mark.parametrize("raw", [None, "", "999", "nope", 0, "99999999999999999999"])
def test_optional_context_degrades_to_none(db, workshop, raw):
    assert normalize_workshop_id(db, raw, required=False) is None


@pytest.mark.parametrize("raw", [None, "", "  "])
def test_required_context_missing(db, raw):
    with pytest.raises(ValidationError) as exc:
        normalize_workshop_id(db, raw, required=True)
    assert exc.value.message == "Workshop is required"
    assert exc.value.status_code == 400


@pytest.mark.parametrize("raw", ["abc", -1, 1.25, False, "99999999999999999999"])
def test_required_context_invalid(db, raw):
    with pytest.raises(ValidationError) as exc:
        normalize_workshop_id(db, raw, required=True)
    assert exc.value.message == "Invalid workshop id"


def test_required_context_unknown_workshop(db, workshop):
    with pytest.raises(ReferenceNotFound) as exc:
        normalize_workshop_id(db, workshop.id + 1, required=True)
    assert exc.value.message == f"Workshop with ID {workshop.id + 1} does not exist"
