"""Product aggregate.

Products live independently of orders and drafts. They have their own
lifecycle: prices change, products are added to the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.value_objects import Money


@dataclass
class Product:
    """A sellable product in the catalog.

    Drafts and orders only ever read a product; they copy its price into
    their own lines when the line is created.
    """

    id: str
    name: str
    price: Money

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing draft lines and orders keep the price they captured.
        """
        if new_price.currency != self.price.currency:
            raise ValidationError(
                f"Cannot change currency of '{self.name}' "
                f"from {self.price.currency} to {new_price.currency}"
            )
        self.price = new_price
