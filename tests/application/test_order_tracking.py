"""Integration tests for tracking persisted orders and housekeeping drafts."""

from datetime import date, datetime

import pytest

from orderdesk.application.cancel_draft import PruneDraftsHandler
from orderdesk.application.compose_draft import AddLineHandler, SetQuantityHandler
from orderdesk.application.order_status import SetItemStatusHandler, SetOrderStatusHandler
from orderdesk.application.show_order import ListOrdersHandler
from orderdesk.application.start_draft import EditOrderHandler, StartDraftHandler
from orderdesk.application.submit_draft import SubmitDraftHandler
from orderdesk.domain.exceptions import EntityNotFoundError, UnknownLineError, ValidationError
from orderdesk.domain.model.order import ItemStatus, OrderStatus
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money
from tests.fakes import FakeDraftRepository, FakeOrderRepository, FakeProductRepository


@pytest.fixture
def repos():
    products = [
        Product(id="1", name="Sourdough", price=Money.of("2.00")),
        Product(id="2", name="Baguette", price=Money.of("3.00")),
    ]
    return FakeDraftRepository(), FakeOrderRepository(), FakeProductRepository(products)


def _place(repos, customer: str, delivery: datetime | None = None) -> int:
    """Helper: compose and submit a one-loaf order, returning the order id."""
    draft_repo, order_repo, product_repo = repos
    dto = StartDraftHandler(draft_repo, product_repo).handle(customer, delivery)
    AddLineHandler(draft_repo, product_repo).handle(dto.id, "1")
    SetQuantityHandler(draft_repo, product_repo).handle(dto.id, "1", 1)
    return SubmitDraftHandler(draft_repo, order_repo).handle(dto.id).id


class TestSetOrderStatus:

    def test_status_is_persisted(self, repos):
        _, order_repo, _ = repos
        order_id = _place(repos, "Alice")

        dto = SetOrderStatusHandler(order_repo).handle(order_id, "in-process")

        assert dto.status == "IN_PROCESS"
        assert order_repo.get_by_id(order_id).status == OrderStatus.IN_PROCESS

    def test_unknown_status(self, repos):
        _, order_repo, _ = repos
        order_id = _place(repos, "Alice")
        with pytest.raises(ValidationError, match="Unknown order status 'baking'"):
            SetOrderStatusHandler(order_repo).handle(order_id, "baking")

    def test_unknown_order(self, repos):
        _, order_repo, _ = repos
        with pytest.raises(EntityNotFoundError, match="Order #5 not found"):
            SetOrderStatusHandler(order_repo).handle(5, "READY")

    def test_completed_order_cannot_be_edited(self, repos):
        draft_repo, order_repo, product_repo = repos
        order_id = _place(repos, "Alice")
        SetOrderStatusHandler(order_repo).handle(order_id, "COMPLETED")

        with pytest.raises(ValidationError, match="COMPLETED"):
            EditOrderHandler(draft_repo, order_repo, product_repo).handle(order_id)


class TestSetItemStatus:

    def test_item_status_is_persisted(self, repos):
        _, order_repo, _ = repos
        order_id = _place(repos, "Alice")

        dto = SetItemStatusHandler(order_repo).handle(order_id, "1", "done")

        assert [(i.product_id, i.status) for i in dto.items] == [("1", "DONE")]
        assert order_repo.get_by_id(order_id).items[0].status == ItemStatus.DONE

    def test_item_not_on_order(self, repos):
        _, order_repo, _ = repos
        order_id = _place(repos, "Alice")
        with pytest.raises(UnknownLineError):
            SetItemStatusHandler(order_repo).handle(order_id, "2", "DONE")

    def test_unknown_item_status(self, repos):
        _, order_repo, _ = repos
        order_id = _place(repos, "Alice")
        with pytest.raises(ValidationError, match="Unknown item status"):
            SetItemStatusHandler(order_repo).handle(order_id, "1", "burnt")


class TestDeliveryRange:

    @pytest.fixture
    def handler(self, repos):
        _place(repos, "Alice", datetime(2026, 11, 1, 8, 0))
        _place(repos, "Bob", datetime(2026, 11, 2, 23, 30))
        _place(repos, "Carol", datetime(2026, 11, 3, 0, 0))
        _place(repos, "Dave")
        return ListOrdersHandler(repos[1])

    def test_bounds_are_inclusive_days(self, handler):
        orders = handler.handle(delivery_from=date(2026, 11, 1), delivery_to=date(2026, 11, 2))
        assert [o.customer_name for o in orders] == ["Alice", "Bob"]

    def test_open_ended_ranges(self, handler):
        assert [o.customer_name for o in handler.handle(delivery_from=date(2026, 11, 2))] == [
            "Bob",
            "Carol",
        ]
        assert [o.customer_name for o in handler.handle(delivery_to=date(2026, 11, 1))] == [
            "Alice",
        ]

    def test_undated_orders_only_without_range(self, handler):
        assert "Dave" in [o.customer_name for o in handler.handle()]
        assert "Dave" not in [
            o.customer_name for o in handler.handle(delivery_to=date(2030, 1, 1))
        ]

    def test_reversed_range_rejected(self, handler):
        with pytest.raises(ValidationError, match="starts after it ends"):
            handler.handle(delivery_from=date(2026, 11, 3), delivery_to=date(2026, 11, 1))

    def test_combines_with_status_filter(self, repos, handler):
        SetOrderStatusHandler(repos[1]).handle(2, "READY")
        orders = handler.handle(statuses=["READY"], delivery_from=date(2026, 11, 1))
        assert [o.customer_name for o in orders] == ["Bob"]


class TestPruneDrafts:

    def test_removes_only_submitted_drafts(self, repos):
        draft_repo, order_repo, product_repo = repos
        _place(repos, "Alice")
        open_draft = StartDraftHandler(draft_repo, product_repo).handle("Bob")

        assert PruneDraftsHandler(draft_repo).handle() == [1]

        assert draft_repo.get_by_id(1) is None
        assert draft_repo.get_by_id(open_draft.id) is not None
        assert order_repo.get_by_id(1) is not None

    def test_nothing_to_prune(self, repos):
        draft_repo, _, product_repo = repos
        StartDraftHandler(draft_repo, product_repo).handle("Bob")
        assert PruneDraftsHandler(draft_repo).handle() == []
