from django.apps import AppConfig


class UnitsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.units"

    def ready(self) -> None:
        from . import handlers

        handlers.register()
