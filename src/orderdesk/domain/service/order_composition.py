"""Domain service: Order Composition.

Applies user intents (select, add, remove, set quantity) to a draft
against a catalog snapshot.  Every mutation is followed by an
availability recompute, and the draft's ``selected_product_id`` is
reset from the fresh result, so the caller always gets a consistent
``(draft, available, selected, total)`` to render.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from orderdesk.domain.exceptions import (
    DuplicateProductError,
    UnknownProductError,
    ValidationError,
)
from orderdesk.domain.model.draft import OrderDraft, OrderLine
from orderdesk.domain.model.product import Product
from orderdesk.domain.service.availability import Availability, recompute


class OrderComposer:

    def __init__(self, catalog: Sequence[Product]) -> None:
        # Snapshot; valid for the duration of one intent.
        self._catalog = tuple(catalog)

    @property
    def catalog(self) -> tuple[Product, ...]:
        return self._catalog

    def add_line(self, draft: OrderDraft, product_id: str | None = None) -> Availability:
        """Add a zero-quantity line for *product_id*.

        Without an explicit product the draft's current selection is used.
        """
        draft.ensure_editable()
        if product_id is None:
            product_id = draft.selected_product_id
            if product_id is None:
                raise ValidationError("No product left to add to this order")

        existing = draft.find_line(product_id)
        if existing is not None:
            raise DuplicateProductError(
                f"'{existing.product_name}' is already on this order"
            )
        product = self._find_product(product_id)
        draft.add_line(product)
        return self._reset_selection(draft)

    def remove_line(self, draft: OrderDraft, product_id: str) -> Availability:
        """Remove the line for *product_id*; a missing line is not an error."""
        draft.remove_line(product_id)
        return self._reset_selection(draft)

    def update_quantity(
        self,
        draft: OrderDraft,
        product_id: str,
        quantity: str | int | Decimal,
    ) -> OrderLine:
        # The set of products on the draft is unchanged, so a valid
        # selection is kept.
        line = draft.update_quantity(product_id, quantity)
        self.refresh(draft)
        return line

    def select_product(self, draft: OrderDraft, product_id: str) -> Availability:
        """Point the "add line" control at *product_id*."""
        draft.ensure_editable()
        product = self._find_product(product_id)
        if draft.find_line(product_id) is not None:
            raise DuplicateProductError(f"'{product.name}' is already on this order")
        draft.selected_product_id = product_id
        return recompute(draft, self._catalog)

    def refresh(self, draft: OrderDraft) -> Availability:
        """Recompute availability without mutating lines.

        A still-valid user selection survives; a stale one (for example a
        product that has since been added) falls back to the first
        available product.
        """
        availability = recompute(draft, self._catalog)
        if draft.is_editable and not (
            draft.selected_product_id is not None
            and availability.contains(draft.selected_product_id)
        ):
            draft.selected_product_id = availability.selected
        return availability

    # --- Internal helpers -----------------------------------------------------

    def _reset_selection(self, draft: OrderDraft) -> Availability:
        availability = recompute(draft, self._catalog)
        draft.selected_product_id = availability.selected
        return availability

    def _find_product(self, product_id: str) -> Product:
        for product in self._catalog:
            if product.id == product_id:
                return product
        raise UnknownProductError(f"Product with ID '{product_id}' not found")
