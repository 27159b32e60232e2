"""Unit tests for the availability resolver."""

from orderdesk.domain.model.draft import OrderDraft
from orderdesk.domain.service.availability import recompute


def _draft_with(catalog, *product_ids: str) -> OrderDraft:
    draft = OrderDraft.new("Alice")
    by_id = {p.id: p for p in catalog}
    for pid in product_ids:
        draft.add_line(by_id[pid])
    return draft


class TestRecompute:

    def test_empty_draft_offers_full_catalog(self, catalog):
        result = recompute(OrderDraft.new("Alice"), catalog)
        assert list(result.available) == catalog
        assert result.selected == "A"
        assert result.can_add

    def test_used_products_are_excluded(self, catalog):
        result = recompute(_draft_with(catalog, "A", "C"), catalog)
        assert [p.id for p in result.available] == ["B"]
        assert result.selected == "B"

    def test_catalog_order_is_preserved(self, catalog):
        result = recompute(_draft_with(catalog, "B"), catalog)
        assert [p.id for p in result.available] == ["A", "C"]
        assert result.selected == "A"

    def test_never_offers_a_product_already_on_a_line(self, catalog):
        for used in (set(), {"A"}, {"B"}, {"A", "B"}, {"A", "B", "C"}):
            draft = _draft_with(catalog, *sorted(used))
            result = recompute(draft, catalog)
            assert not {p.id for p in result.available} & draft.product_ids

    def test_everything_used(self, catalog):
        result = recompute(_draft_with(catalog, "A", "B", "C"), catalog)
        assert result.available == ()
        assert result.selected is None
        assert not result.can_add

    def test_empty_catalog(self):
        result = recompute(OrderDraft.new("Alice"), [])
        assert result.available == ()
        assert result.selected is None
        assert not result.can_add

    def test_is_pure(self, catalog):
        draft = _draft_with(catalog, "A")
        draft.selected_product_id = "C"
        recompute(draft, catalog)
        assert draft.selected_product_id == "C"
        assert len(draft.lines) == 1
