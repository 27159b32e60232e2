"""JSON-file-backed implementation of DraftRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from orderdesk.domain.model.draft import DraftStatus, OrderDraft, OrderLine
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.draft_repository import DraftRepository


class JsonDraftRepository(DraftRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- DraftRepository interface --------------------------------------------

    def get_by_id(self, draft_id: int) -> OrderDraft | None:
        for raw in self._load_raw():
            if raw["id"] == draft_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[OrderDraft]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, draft: OrderDraft) -> None:
        drafts = self._load_raw()

        if draft.id is None:
            draft.id = max((d["id"] for d in drafts), default=0) + 1

        replaced = False
        for i, raw in enumerate(drafts):
            if raw["id"] == draft.id:
                drafts[i] = self._to_raw(draft)
                replaced = True
                break
        if not replaced:
            drafts.append(self._to_raw(draft))

        self._persist_raw(drafts)

    def delete(self, draft_id: int) -> None:
        drafts = self._load_raw()
        remaining = [d for d in drafts if d["id"] != draft_id]
        if len(remaining) != len(drafts):
            self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(draft: OrderDraft) -> dict:
        return {
            "id": draft.id,
            "customer_name": draft.customer_name,
            "status": draft.status.value,
            "order_id": draft.order_id,
            "selected_product_id": draft.selected_product_id,
            "currency": draft.currency,
            "delivery_date": (
                draft.delivery_date.isoformat() if draft.delivery_date else None
            ),
            "created_at": draft.created_at.isoformat(),
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": str(line.quantity),
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                }
                for line in draft.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> OrderDraft:
        lines = [
            OrderLine(
                product_id=line["product_id"],
                product_name=line["product_name"],
                unit_price=Money(Decimal(line["unit_price"]), line.get("currency", "USD")),
                quantity=Decimal(line["quantity"]),
            )
            for line in raw["lines"]
        ]
        delivery_date = raw.get("delivery_date")
        return OrderDraft(
            id=raw["id"],
            customer_name=raw["customer_name"],
            lines=lines,
            selected_product_id=raw.get("selected_product_id"),
            delivery_date=datetime.fromisoformat(delivery_date) if delivery_date else None,
            order_id=raw.get("order_id"),
            status=DraftStatus(raw["status"]),
            currency=raw.get("currency", "USD"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, drafts: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(drafts, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
