from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.products.handlers import HANDLERS
        from shared.infrastructure.bus import message_bus

        for pattern, handler in HANDLERS.items():
            message_bus.subscribe(pattern, handler)
