"""Admin registrations for fightsim models."""

from django.contrib import admin

from . import models


@admin.register(models.RosterFighter)
class RosterFighterAdmin(admin.ModelAdmin):
    list_display = ("person_id", "first_name", "last_name", "nationality", "wins", "losses")
    list_filter = ("nationality",)
    search_fields = ("first_name", "last_name", "hometown")
