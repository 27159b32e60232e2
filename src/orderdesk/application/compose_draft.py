"""Application service: Compose Draft use cases.

One handler per user intent.  Each loads the draft, takes a fresh
catalog snapshot, applies the intent through the OrderComposer domain
service and persists the result.  The returned DraftDTO always carries
the recomputed availability and total.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from orderdesk.application.dto import DraftDTO
from orderdesk.application.mapping import draft_to_dto
from orderdesk.domain.exceptions import EntityNotFoundError
from orderdesk.domain.model.draft import OrderDraft
from orderdesk.domain.repository.draft_repository import DraftRepository
from orderdesk.domain.repository.product_repository import ProductRepository
from orderdesk.domain.service.order_composition import OrderComposer

logger = logging.getLogger(__name__)


class _DraftHandler:

    def __init__(
        self,
        draft_repo: DraftRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._draft_repo = draft_repo
        self._product_repo = product_repo

    def _load(self, draft_id: int) -> OrderDraft:
        draft = self._draft_repo.get_by_id(draft_id)
        if draft is None:
            raise EntityNotFoundError(f"Draft #{draft_id} not found")
        return draft

    def _composer(self) -> OrderComposer:
        return OrderComposer(self._product_repo.list_all())


class ShowDraftHandler(_DraftHandler):

    def handle(self, draft_id: int) -> DraftDTO:
        draft = self._load(draft_id)
        availability = self._composer().refresh(draft)
        return draft_to_dto(draft, availability)


class SelectProductHandler(_DraftHandler):

    def handle(self, draft_id: int, product_id: str) -> DraftDTO:
        draft = self._load(draft_id)
        availability = self._composer().select_product(draft, product_id)
        self._draft_repo.save(draft)

        logger.debug("Draft #%s: selected product %s", draft_id, product_id)
        return draft_to_dto(draft, availability)


class AddLineHandler(_DraftHandler):

    def handle(self, draft_id: int, product_id: str | None = None) -> DraftDTO:
        """Add a line for *product_id*, or for the draft's selection if omitted."""
        draft = self._load(draft_id)
        availability = self._composer().add_line(draft, product_id)
        self._draft_repo.save(draft)

        logger.info(
            "Draft #%s: added %s (%d lines)",
            draft_id, draft.lines[-1].product_name, len(draft.lines),
        )
        return draft_to_dto(draft, availability)


class RemoveLineHandler(_DraftHandler):

    def handle(self, draft_id: int, product_id: str) -> DraftDTO:
        draft = self._load(draft_id)
        availability = self._composer().remove_line(draft, product_id)
        self._draft_repo.save(draft)

        logger.info("Draft #%s: removed product %s", draft_id, product_id)
        return draft_to_dto(draft, availability)


class SetQuantityHandler(_DraftHandler):

    def handle(
        self,
        draft_id: int,
        product_id: str,
        quantity: str | int | Decimal,
    ) -> DraftDTO:
        draft = self._load(draft_id)
        composer = self._composer()
        line = composer.update_quantity(draft, product_id, quantity)
        availability = composer.refresh(draft)
        self._draft_repo.save(draft)

        logger.info(
            "Draft #%s: %s quantity set to %s",
            draft_id, line.product_name, line.quantity,
        )
        return draft_to_dto(draft, availability)
