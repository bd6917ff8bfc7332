from pathlib import Path

from django.conf import settings

from fightsim.engine.config import MAX_ACTIONS

ROSTER_PATH = Path(
    getattr(settings, "FIGHTSIM_ROSTER_PATH", Path(__file__).resolve().parent / "data" / "fighters.json")
)
MAX_BOUT_ACTIONS = int(getattr(settings, "FIGHTSIM_MAX_ACTIONS", MAX_ACTIONS))
