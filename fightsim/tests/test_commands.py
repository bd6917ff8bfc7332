import json
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from fightsim.models import RosterFighter


def test_load_roster_from_bundled_file(db):
    out = StringIO()
    call_command("load_roster", stdout=out)
    assert "Imported 6 created, 0 updated" in out.getvalue()
    assert RosterFighter.objects.filter(last_name="McGregor").exists()

    out = StringIO()
    call_command("load_roster", stdout=out)
    assert "Imported 0 created, 6 updated" in out.getvalue()


def test_load_roster_from_custom_file(db, tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(
        json.dumps([{"personid": 42, "firstname": "Test", "lastname": "Fighter"}]),
        encoding="utf-8",
    )
    call_command("load_roster", "--file", str(path), stdout=StringIO())
    assert RosterFighter.objects.get(person_id=42).full_name == "Test Fighter"


def test_load_roster_errors(db, tmp_path):
    with pytest.raises(CommandError, match="not found"):
        call_command("load_roster", "--file", str(tmp_path / "missing.json"))

    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"personid": 1}]), encoding="utf-8")
    with pytest.raises(CommandError, match="Record 1: missing firstname, lastname"):
        call_command("load_roster", "--file", str(path))


def test_simulate_bout_demo_pair(db):
    out = StringIO()
    call_command("simulate_bout", "--seed", "8", stdout=out)
    lines = out.getvalue().splitlines()
    assert "by KO" in lines[-1]
    assert any("Conor McGregor" in line for line in lines)


def test_simulate_bout_roster_pair(db):
    call_command("load_roster", stdout=StringIO())
    out = StringIO()
    call_command("simulate_bout", "--red", "3", "--blue", "4", "--seed", "2", stdout=out)
    assert "by KO" in out.getvalue()


def test_simulate_bout_argument_errors(db):
    with pytest.raises(CommandError, match="both --red and --blue"):
        call_command("simulate_bout", "--red", "1")
    with pytest.raises(CommandError, match="Unknown roster fighter"):
        call_command("simulate_bout", "--red", "1", "--blue", "2")
    with pytest.raises(CommandError, match="--max-actions"):
        call_command("simulate_bout", "--max-actions", "0")


def test_load_roster_rejects_non_object_items(db, tmp_path):
    path = tmp_path / "numbers.json"
    path.write_text(json.dumps([1, 2]), encoding="utf-8")
    with pytest.raises(CommandError, match="Record 1: expected an object"):
        call_command("load_roster", "--file", str(path))
    assert not RosterFighter.objects.exists()
