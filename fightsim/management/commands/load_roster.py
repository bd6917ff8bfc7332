"""Management command to import the static roster file."""

from __future__ import annotations

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError, CommandParser

from fightsim.conf import ROSTER_PATH
from fightsim.providers.json_file import JsonFileRosterProvider
from fightsim.services.roster import import_roster


class Command(BaseCommand):
    help = "Import roster fighters from a JSON file"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--file", type=Path, default=ROSTER_PATH)

    def handle(self, *args, **options):
        file_path: Path = options["file"]
        if not file_path.exists():
            raise CommandError(f"Roster file not found: {file_path}")

        try:
            created, updated = import_roster(JsonFileRosterProvider(file_path))
        except ValueError as exc:
            raise CommandError(str(exc)) from exc
        self.stdout.write(self.style.SUCCESS(f"Imported {created} created, {updated} updated"))
