"""Data models for the fightsim app."""

from django.db import models


class RosterFighter(models.Model):
    """A fighter as listed on the public roster (not a simulation snapshot)."""

    person_id = models.PositiveIntegerField(unique=True)
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    nationality = models.CharField(max_length=100, blank=True)
    hometown = models.CharField(max_length=100, blank=True)
    wins = models.PositiveIntegerField(default=0)
    losses = models.PositiveIntegerField(default=0)
    image = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["last_name", "first_name"]
        indexes = [
            models.Index(fields=["nationality"], name="fightsim_ro_nationa_8d2f0b_idx"),
        ]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.full_name

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def record(self) -> str:
        return f"{self.wins}W-{self.losses}L"
