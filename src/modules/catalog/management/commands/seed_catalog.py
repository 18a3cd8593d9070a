from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.catalog.context import get_catalog_context
from modules.catalog.seed import seed_products


class Command(BaseCommand):
    help = "Seed the catalog collection with sample products when it is empty."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Drop every existing product before seeding.",
        )

    def handle(self, *args, **options):
        products = get_catalog_context().products

        if options["force"]:
            removed = products.delete_many({}).deleted_count
            self.stdout.write(self.style.WARNING(f"Removed {removed} products."))

        self.stdout.write("Seeding catalog...")
        inserted = seed_products(products)
        if inserted:
            self.stdout.write(self.style.SUCCESS(f"Seed completed: products={inserted}"))
        else:
            self.stdout.write(
                self.style.WARNING("Catalog already has products, nothing seeded.")
            )
