"""Root conftest for all tests.

Shared catalog and store fixtures for the highlights suite.
"""

from decimal import Decimal

import pytest

from menu_admin.highlights.discount import Discount
from menu_admin.highlights.schedule import WeeklyScheduleStore
from menu_admin.highlights.types import Product


@pytest.fixture
def sample_products() -> list[Product]:
    """Menu catalog used by the admin picker."""
    rows = [
        (101, "Feijoada Completa", 35.90, "Pratos Principais"),
        (102, "Hambúrguer Artesanal", 28.90, "Hambúrgueres"),
        (103, "Risotto de Camarão", 58.90, "Pratos Principais"),
        (104, "Salmão Grelhado", 49.90, "Pratos Principais"),
        (201, "Suco Natural de Laranja", 8.90, "Bebidas"),
        (202, "Refrigerante Coca-Cola", 5.90, "Bebidas"),
        (301, "Tiramisù Tradicional", 24.90, "Sobremesas"),
        (302, "Pudim de Leite", 18.90, "Sobremesas"),
    ]
    return [
        Product(id=product_id, name=name, description=f"{name} da casa", price=price, category=category)
        for product_id, name, price, category in rows
    ]


@pytest.fixture
def feijoada(sample_products: list[Product]) -> Product:
    return sample_products[0]


@pytest.fixture
def hamburguer(sample_products: list[Product]) -> Product:
    return sample_products[1]


@pytest.fixture
def store() -> WeeklyScheduleStore:
    return WeeklyScheduleStore()


@pytest.fixture
def seeded_store(store: WeeklyScheduleStore, feijoada: Product, hamburguer: Product) -> WeeklyScheduleStore:
    """Feijoada on Sunday at 15% off, burger on Monday at R$ 5,00 off."""
    assert store.add_product_to_day(0, feijoada, Discount(type="percentage", value=15)).success
    assert store.add_product_to_day(1, hamburguer, Discount(type="fixed", value=Decimal("5.00"))).success
    return store
