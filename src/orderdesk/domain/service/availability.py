"""Availability resolver.

Given the catalog and a draft, work out which products can still be
added and which one the "add line" control should propose.  The result
is always recomputed from scratch, never patched incrementally.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from orderdesk.domain.model.draft import OrderDraft
from orderdesk.domain.model.product import Product


@dataclass(frozen=True)
class Availability:
    available: tuple[Product, ...]
    selected: str | None

    @property
    def can_add(self) -> bool:
        """False when every catalog product is already on the draft."""
        return self.selected is not None

    def contains(self, product_id: str) -> bool:
        return any(p.id == product_id for p in self.available)


def recompute(draft: OrderDraft, catalog: Sequence[Product]) -> Availability:
    """Products not on any line of *draft*, in catalog order, plus the first one's id."""
    used = draft.product_ids
    available = tuple(p for p in catalog if p.id not in used)
    selected = available[0].id if available else None
    return Availability(available=available, selected=selected)
