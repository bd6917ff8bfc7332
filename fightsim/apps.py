from django.apps import AppConfig


class FightsimConfig(AppConfig):
    name = "fightsim"
    verbose_name = "Fight simulation"
    default_auto_field = "django.db.models.BigAutoField"
