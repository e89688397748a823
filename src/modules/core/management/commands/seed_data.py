from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.core.store import get_store
from modules.products.dtos import ProductInputDTO
from modules.products.repositories.mongo_repository import ProductMongoRepository
from modules.products.services import ProductService
from modules.sellers.dtos import SellerCredentialsDTO
from modules.sellers.repositories.mongo_repository import SellerMongoRepository
from modules.sellers.services import SellerService

CATALOG = [
    ("Pen", "Blue ink pen"),
    ("Notebook", "A5 ruled notebook, 80 pages"),
    ("Stapler", "Desktop stapler for up to 20 sheets"),
    ("Desk Lamp", "LED desk lamp with adjustable arm"),
    ("Backpack", "Water-resistant 20L backpack"),
]


class Command(BaseCommand):
    help = "Seed the document store with a demo seller and catalog."

    def add_arguments(self, parser):
        parser.add_argument("--username", default="demo")
        parser.add_argument("--password", default="demo1234")

    def handle(self, *args, **options):
        store = get_store()
        self.stdout.write("Seeding development data...")

        sellers_created = self._seed_seller(
            SellerMongoRepository(store.sellers), options["username"], options["password"]
        )
        products_created = self._seed_products(
            ProductService(ProductMongoRepository(store.products))
        )

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: sellers={sellers_created}, products={products_created}"
            )
        )

    def _seed_seller(self, repository, username: str, password: str) -> int:
        if repository.get_by_username(username) is not None:
            self.stdout.write(f"Seller '{username}' exists, skipping.")
            return 0
        SellerService(repository).register(
            SellerCredentialsDTO(username=username, password=password)
        )
        return 1

    def _seed_products(self, service: ProductService) -> int:
        if service.list_products():
            self.stdout.write("Catalog not empty, skipping products.")
            return 0
        for name, description in CATALOG:
            service.create_product(ProductInputDTO(name=name, description=description))
        return len(CATALOG)
