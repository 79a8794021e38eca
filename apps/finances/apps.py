from django.apps import AppConfig


class FinancesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.finances"

    def ready(self) -> None:
        from . import handlers

        handlers.register()
