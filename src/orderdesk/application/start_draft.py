"""Application service: Start Draft use cases.

A draft is either started empty for a new order, or seeded from the
items of an existing order so the order can be edited.  Either way the
caller gets the draft back together with its initial availability.
"""

from __future__ import annotations

import logging
from datetime import datetime

from orderdesk.application.dto import DraftDTO
from orderdesk.application.mapping import draft_to_dto
from orderdesk.domain.exceptions import EntityNotFoundError, ValidationError
from orderdesk.domain.model.draft import OrderDraft
from orderdesk.domain.repository.draft_repository import DraftRepository
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.product_repository import ProductRepository
from orderdesk.domain.service.order_composition import OrderComposer

logger = logging.getLogger(__name__)


class StartDraftHandler:

    def __init__(
        self,
        draft_repo: DraftRepository,
        product_repo: ProductRepository,
        currency: str = "USD",
    ) -> None:
        self._draft_repo = draft_repo
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        customer_name: str,
        delivery_date: datetime | None = None,
    ) -> DraftDTO:
        draft = OrderDraft.new(
            customer_name=customer_name,
            delivery_date=delivery_date,
            currency=self._currency,
        )
        composer = OrderComposer(self._product_repo.list_all())
        availability = composer.refresh(draft)
        self._draft_repo.save(draft)

        logger.info("Started draft #%s for %s", draft.id, draft.customer_name)
        return draft_to_dto(draft, availability)


class EditOrderHandler:

    def __init__(
        self,
        draft_repo: DraftRepository,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._draft_repo = draft_repo
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int) -> DraftDTO:
        """Load a persisted order into a fresh, editable draft."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        if not order.is_editable:
            raise ValidationError(
                f"Cannot edit order in {order.status.value} status"
            )

        draft = OrderDraft.from_order(order)
        composer = OrderComposer(self._product_repo.list_all())
        availability = composer.refresh(draft)
        self._draft_repo.save(draft)

        logger.info("Loaded order #%s into draft #%s", order_id, draft.id)
        return draft_to_dto(draft, availability)
