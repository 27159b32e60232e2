"""Application service: Submit Draft use case.

Hands the draft's lines over verbatim (product, quantity, unit price)
to the Order aggregate: a new order is created, or the order the draft
was loaded from is revised.  The draft is then marked SUBMITTED and
can no longer change.

The draft is validated *before* anything is persisted, so a rejected
submit leaves both the draft and the order store untouched.
"""

from __future__ import annotations

import logging

from orderdesk.application.dto import OrderDTO
from orderdesk.application.mapping import order_to_dto
from orderdesk.domain.exceptions import EntityNotFoundError
from orderdesk.domain.model.draft import OrderDraft
from orderdesk.domain.model.order import Order, OrderLineItem
from orderdesk.domain.model.value_objects import Quantity
from orderdesk.domain.repository.draft_repository import DraftRepository
from orderdesk.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class SubmitDraftHandler:

    def __init__(
        self,
        draft_repo: DraftRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._draft_repo = draft_repo
        self._order_repo = order_repo

    def handle(self, draft_id: int) -> OrderDTO:
        draft = self._draft_repo.get_by_id(draft_id)
        if draft is None:
            raise EntityNotFoundError(f"Draft #{draft_id} not found")

        draft.ensure_editable()
        draft.check_submittable()
        items = self._to_items(draft)

        if draft.order_id is None:
            order = Order.create(
                customer_name=draft.customer_name,
                items=items,
                delivery_date=draft.delivery_date,
            )
        else:
            order = self._order_repo.get_by_id(draft.order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{draft.order_id} not found")
            order.revise(
                customer_name=draft.customer_name,
                items=items,
                delivery_date=draft.delivery_date,
            )

        self._order_repo.save(order)

        draft.submit()
        draft.order_id = order.id
        self._draft_repo.save(draft)

        logger.info(
            "Draft #%s submitted as order #%s (total %s)",
            draft_id, order.id, order.total,
        )
        return order_to_dto(order)

    @staticmethod
    def _to_items(draft: OrderDraft) -> list[OrderLineItem]:
        return [
            OrderLineItem(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=Quantity(line.quantity),
                unit_price=line.unit_price,  # <-- snapshot from add time
            )
            for line in draft.lines
        ]
