import logging
from collections.abc import Mapping

from django.db import transaction

from ..models import RosterFighter
from ..providers.base import RosterProvider

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("personid", "firstname", "lastname")


def _to_int(value) -> int:
    """Whole-number conversion that refuses booleans and fractional values."""
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("not a whole number")
    return int(value)


def parse_roster_record(raw: Mapping, *, index: int) -> dict:
    """Map one raw roster record onto RosterFighter field values."""
    if not isinstance(raw, Mapping):
        raise ValueError(f"Record {index}: expected an object")
    missing = [key for key in REQUIRED_KEYS if raw.get(key) in (None, "")]
    if missing:
        raise ValueError(f"Record {index}: missing {', '.join(missing)}")
    try:
        person_id = _to_int(raw["personid"])
    except (TypeError, ValueError):
        raise ValueError(f"Record {index}: invalid personid")
    if person_id <= 0:
        raise ValueError(f"Record {index}: personid must be positive")

    counts = {}
    for key in ("wins", "losses"):
        try:
            value = raw.get(key)
            counts[key] = 0 if value in (None, "") else _to_int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Record {index}: invalid {key}")
        if counts[key] < 0:
            raise ValueError(f"Record {index}: {key} must not be negative")

    return {
        "person_id": person_id,
        "first_name": str(raw["firstname"]).strip(),
        "last_name": str(raw["lastname"]).strip(),
        "nationality": str(raw.get("nationality") or "").strip(),
        "hometown": str(raw.get("hometown") or "").strip(),
        "wins": counts["wins"],
        "losses": counts["losses"],
        "image": str(raw.get("image") or "").strip(),
    }


def import_roster(provider: RosterProvider) -> tuple[int, int]:
    """Upsert every record from `provider` by person id.

    The import is all-or-nothing: a malformed record aborts it before any row
    is written.
    """
    rows = [
        parse_roster_record(raw, index=i)
        for i, raw in enumerate(provider.fighters(), start=1)
    ]

    seen: set[int] = set()
    for i, row in enumerate(rows, start=1):
        if row["person_id"] in seen:
            raise ValueError(f"Record {i}: duplicate personid {row['person_id']}")
        seen.add(row["person_id"])

    created = updated = 0
    with transaction.atomic():
        for row in rows:
            person_id = row.pop("person_id")
            _, was_created = RosterFighter.objects.update_or_create(
                person_id=person_id, defaults=row
            )
            if was_created:
                created += 1
            else:
                updated += 1

    logger.info("roster.import created=%s updated=%s", created, updated)
    return created, updated
