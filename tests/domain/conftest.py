import pytest

from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money


@pytest.fixture
def catalog() -> list[Product]:
    return [
        Product(id="A", name="Sourdough", price=Money.of("2.00")),
        Product(id="B", name="Baguette", price=Money.of("3.00")),
        Product(id="C", name="Croissant", price=Money.of("5.00")),
    ]
