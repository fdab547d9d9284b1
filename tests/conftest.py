"""Shared fixtures: stores wired to in-memory slots"""

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.core.dependencies import build_storefront, get_storefront
from storefront.core.events import SignalBus
from storefront.database.carts import CartStore
from storefront.database.storage import MemorySlotStorage
from storefront.database.trials import HomeTrialStore
from storefront.database.wishlists import WishlistStore
from storefront.main import app
from storefront.models.product import Product, ProductCategory


def make_product(
    index: int = 1,
    price="₹2,500",
    original_price=None,
    sizes=("S", "M", "L"),
) -> Product:
    """A catalog product with a display-formatted price"""
    return Product(
        id=f"prod-{index:03d}",
        name=f"Test Kurta {index}",
        brand="Test Brand",
        slug=f"test-kurta-{index}",
        category=ProductCategory.KURTAS,
        image_url=f"/images/test-{index}.jpg",
        sizes=list(sizes),
        price=price,
        original_price=original_price,
    )


@pytest.fixture
def storage() -> MemorySlotStorage:
    return MemorySlotStorage()


@pytest.fixture
def signals() -> SignalBus:
    return SignalBus()


@pytest.fixture
def wishlist(storage) -> WishlistStore:
    return WishlistStore(storage)


@pytest.fixture
def cart(storage, signals, wishlist) -> CartStore:
    return CartStore(storage, signals=signals, wishlist=wishlist)


@pytest.fixture
def trial(storage, signals) -> HomeTrialStore:
    return HomeTrialStore(storage, signals=signals)


@pytest.fixture
def product_a() -> Product:
    return make_product(1, price="₹2,500", original_price="₹3,000")


@pytest.fixture
def product_b() -> Product:
    return make_product(2, price=899)


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_dir=None, payment_delay_seconds=0)


@pytest.fixture
def storefront(settings, storage):
    return build_storefront(settings, storage=storage)


@pytest.fixture
def client(storefront):
    app.dependency_overrides[get_storefront] = lambda: storefront
    yield TestClient(app)
    app.dependency_overrides.clear()
