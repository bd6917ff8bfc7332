"""Run a simulated bout and print its log."""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError, CommandParser

from fightsim.conf import MAX_BOUT_ACTIONS
from fightsim.engine import simulate_bout
from fightsim.services.bouts import demo_fighters, roster_bout


class Command(BaseCommand):
    help = "Simulate a bout between two roster fighters (or the demo pair)"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--red", type=int, help="person id of the red corner")
        parser.add_argument("--blue", type=int, help="person id of the blue corner")
        parser.add_argument("--seed", type=int, default=None)
        parser.add_argument("--max-actions", type=int, default=MAX_BOUT_ACTIONS)

    def handle(self, *args, **options):
        red_id = options["red"]
        blue_id = options["blue"]
        if (red_id is None) != (blue_id is None):
            raise CommandError("Pass both --red and --blue, or neither for the demo pair.")
        if options["max_actions"] < 1:
            raise CommandError("--max-actions must be at least 1")

        if red_id is None:
            red, blue = demo_fighters()
            result = simulate_bout(
                red, blue, seed=options["seed"], max_actions=options["max_actions"]
            )
        else:
            try:
                result = roster_bout(
                    red_id,
                    blue_id,
                    seed=options["seed"],
                    max_actions=options["max_actions"],
                )
            except ValidationError as exc:
                raise CommandError("; ".join(exc.messages)) from exc

        for event in result.events:
            self.stdout.write(event.text)
        self.stdout.write(self.style.SUCCESS(result.summary_text))
