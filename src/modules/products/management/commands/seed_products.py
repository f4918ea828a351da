from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Keyboard", "Mechanical keyboard, US layout", Decimal("79.90")),
    ("Mouse", "Wireless optical mouse", Decimal("24.90")),
    ("Monitor 27\"", "IPS panel, 1440p", Decimal("299.00")),
    ("Headset", "Over-ear, noise cancelling", Decimal("149.00")),
    ("Webcam", "1080p, built-in microphone", Decimal("59.90")),
    ("Laptop Stand", "Aluminium, adjustable height", Decimal("39.90")),
    ("USB-C Hub", "7 ports, HDMI and Ethernet", Decimal("49.90")),
    ("Desk Lamp", "LED, dimmable", Decimal("29.90")),
    ("Office Chair", "Ergonomic, lumbar support", Decimal("349.00")),
    ("Notebook", "A5, dotted pages", Decimal("9.90")),
]


class Command(BaseCommand):
    help = "Seed the database with sample products for development."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--inactive",
            type=int,
            default=0,
            help="Number of seeded products to soft-delete afterwards.",
        )

    def handle(self, *args, **options):
        self.stdout.write("Creating products...")
        products: list[Product] = []
        for name, description, price in CATALOG:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={"description": description, "price": price},
            )
            products.append(product)

        inactive = min(max(options["inactive"], 0), len(products))
        for product in products[len(products) - inactive :]:
            product.delete()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"products={len(products)}, "
                f"inactive={inactive}"
            )
        )
