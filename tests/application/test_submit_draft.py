"""Integration tests for submitting drafts and editing orders."""

import pytest

from orderdesk.application.cancel_draft import CancelDraftHandler
from orderdesk.application.cancel_order import CancelOrderHandler
from orderdesk.application.compose_draft import (
    AddLineHandler,
    RemoveLineHandler,
    SetQuantityHandler,
)
from orderdesk.application.show_order import ListOrdersHandler, ShowOrderHandler
from orderdesk.application.start_draft import EditOrderHandler, StartDraftHandler
from orderdesk.application.submit_draft import SubmitDraftHandler
from orderdesk.domain.exceptions import (
    DraftNotEditableError,
    EntityNotFoundError,
    ValidationError,
)
from orderdesk.domain.model.draft import DraftStatus
from orderdesk.domain.model.order import ItemStatus, OrderStatus
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money
from tests.fakes import FakeDraftRepository, FakeOrderRepository, FakeProductRepository


def _setup():
    products = [
        Product(id="1", name="Sourdough", price=Money.of("2.00")),
        Product(id="2", name="Baguette", price=Money.of("3.00")),
        Product(id="3", name="Croissant", price=Money.of("5.00")),
    ]
    return FakeDraftRepository(), FakeOrderRepository(), FakeProductRepository(products)


def _compose(draft_repo, product_repo, customer: str, quantities: dict[str, str]) -> int:
    """Helper: start a draft and add one line per product with its quantity."""
    dto = StartDraftHandler(draft_repo, product_repo).handle(customer)
    add = AddLineHandler(draft_repo, product_repo)
    qty = SetQuantityHandler(draft_repo, product_repo)
    for product_id, quantity in quantities.items():
        add.handle(dto.id, product_id)
        qty.handle(dto.id, product_id, quantity)
    return dto.id


class TestSubmitNewOrder:

    def test_creates_order_from_lines(self):
        draft_repo, order_repo, product_repo = _setup()
        draft_id = _compose(draft_repo, product_repo, "Alice", {"1": "2", "2": "1"})

        dto = SubmitDraftHandler(draft_repo, order_repo).handle(draft_id)

        assert dto.id == 1
        assert dto.status == "UNCONFIRMED"
        assert dto.total == "$7.00"
        assert [(i.product_name, i.quantity, i.unit_price) for i in dto.items] == [
            ("Sourdough", "2", "$2.00"),
            ("Baguette", "1", "$3.00"),
        ]

    def test_draft_becomes_immutable(self):
        draft_repo, order_repo, product_repo = _setup()
        draft_id = _compose(draft_repo, product_repo, "Alice", {"1": "1"})
        SubmitDraftHandler(draft_repo, order_repo).handle(draft_id)

        saved = draft_repo.get_by_id(draft_id)
        assert saved.status == DraftStatus.SUBMITTED
        assert saved.order_id == 1

        with pytest.raises(DraftNotEditableError):
            AddLineHandler(draft_repo, product_repo).handle(draft_id, "2")
        with pytest.raises(DraftNotEditableError):
            SubmitDraftHandler(draft_repo, order_repo).handle(draft_id)
        with pytest.raises(DraftNotEditableError):
            CancelDraftHandler(draft_repo).handle(draft_id)

    def test_zero_quantity_line_blocks_submit(self):
        draft_repo, order_repo, product_repo = _setup()
        draft_id = _compose(draft_repo, product_repo, "Alice", {"1": "1"})
        AddLineHandler(draft_repo, product_repo).handle(draft_id, "3")

        with pytest.raises(ValidationError, match="Croissant"):
            SubmitDraftHandler(draft_repo, order_repo).handle(draft_id)

        assert order_repo.list_all() == []
        assert draft_repo.get_by_id(draft_id).status == DraftStatus.EDITABLE

    def test_empty_draft_blocks_submit(self):
        draft_repo, order_repo, product_repo = _setup()
        dto = StartDraftHandler(draft_repo, product_repo).handle("Alice")

        with pytest.raises(ValidationError, match="at least one item"):
            SubmitDraftHandler(draft_repo, order_repo).handle(dto.id)

    def test_unknown_draft(self):
        draft_repo, order_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            SubmitDraftHandler(draft_repo, order_repo).handle(5)


class TestEditOrder:

    def _submitted_order(self):
        draft_repo, order_repo, product_repo = _setup()
        draft_id = _compose(draft_repo, product_repo, "Alice", {"1": "2", "2": "1"})
        order_dto = SubmitDraftHandler(draft_repo, order_repo).handle(draft_id)
        return draft_repo, order_repo, product_repo, order_dto.id

    def test_edit_seeds_draft_from_order(self):
        draft_repo, order_repo, product_repo, order_id = self._submitted_order()

        dto = EditOrderHandler(draft_repo, order_repo, product_repo).handle(order_id)

        assert dto.order_id == order_id
        assert [line.product_id for line in dto.lines] == ["1", "2"]
        assert [p.id for p in dto.available] == ["3"]
        assert dto.selected_product_id == "3"
        assert dto.total == "$7.00"

    def test_edit_keeps_old_prices_and_statuses(self):
        draft_repo, order_repo, product_repo, order_id = self._submitted_order()

        order = order_repo.get_by_id(order_id)
        order.items[0].status = ItemStatus.DONE
        order_repo.save(order)

        sourdough = product_repo.get_by_id("1")
        sourdough.update_price(Money.of("10.00"))
        product_repo.save(sourdough)

        dto = EditOrderHandler(draft_repo, order_repo, product_repo).handle(order_id)
        RemoveLineHandler(draft_repo, product_repo).handle(dto.id, "2")
        AddLineHandler(draft_repo, product_repo).handle(dto.id, "3")
        SetQuantityHandler(draft_repo, product_repo).handle(dto.id, "3", "1")

        result = SubmitDraftHandler(draft_repo, order_repo).handle(dto.id)

        assert result.id == order_id
        assert [(i.product_name, i.unit_price, i.status) for i in result.items] == [
            ("Sourdough", "$2.00", "DONE"),
            ("Croissant", "$5.00", "TODO"),
        ]
        assert result.total == "$9.00"
        assert len(order_repo.list_all()) == 1

    def test_cancel_edit_leaves_order_untouched(self):
        draft_repo, order_repo, product_repo, order_id = self._submitted_order()

        dto = EditOrderHandler(draft_repo, order_repo, product_repo).handle(order_id)
        RemoveLineHandler(draft_repo, product_repo).handle(dto.id, "1")
        CancelDraftHandler(draft_repo).handle(dto.id)

        shown = ShowOrderHandler(order_repo).handle(order_id)
        assert shown.total == "$7.00"
        assert len(shown.items) == 2

    def test_cancelled_order_cannot_be_edited(self):
        draft_repo, order_repo, product_repo, order_id = self._submitted_order()
        CancelOrderHandler(order_repo).handle(order_id)

        with pytest.raises(ValidationError, match="CANCELLED"):
            EditOrderHandler(draft_repo, order_repo, product_repo).handle(order_id)

    def test_unknown_order(self):
        draft_repo, order_repo, product_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #3 not found"):
            EditOrderHandler(draft_repo, order_repo, product_repo).handle(3)


class TestListOrders:

    def test_filters_by_status_and_customer(self):
        draft_repo, order_repo, product_repo = _setup()
        for name in ("Alice", "Bob", "Alicia"):
            draft_id = _compose(draft_repo, product_repo, name, {"1": "1"})
            SubmitDraftHandler(draft_repo, order_repo).handle(draft_id)
        CancelOrderHandler(order_repo).handle(3)

        handler = ListOrdersHandler(order_repo)

        assert [o.customer_name for o in handler.handle()] == ["Alice", "Bob", "Alicia"]
        assert [o.customer_name for o in handler.handle(customer_name="ali")] == [
            "Alice",
            "Alicia",
        ]
        assert [o.id for o in handler.handle(statuses=["cancelled"])] == [3]
        assert OrderStatus.CANCELLED.value == handler.handle(statuses=["CANCELLED"])[0].status

    def test_unknown_status_rejected(self):
        _, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Unknown order status"):
            ListOrdersHandler(order_repo).handle(statuses=["lost"])
