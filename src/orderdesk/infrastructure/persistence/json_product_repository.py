"""JSON-file-backed product catalog.

The file is a JSON list and list order is catalog order.  Every read
goes through ``list_all()``, which parses and checks the whole file, so
lookups and availability work from the same snapshot.
"""

from __future__ import annotations

import json
from pathlib import Path

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        if not self._file_path.exists():
            self._write([])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return next((p for p in self.list_all() if p.id == product_id), None)

    def get_by_name(self, name: str) -> Product | None:
        wanted = name.casefold()
        return next((p for p in self.list_all() if p.name.casefold() == wanted), None)

    def list_all(self) -> list[Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        catalog: list[Product] = []
        seen: set[str] = set()
        for position, entry in enumerate(raw, start=1):
            product = self._to_domain(entry, position)
            if product.id in seen:
                raise ValidationError(
                    f"{self._file_path.name}: product ID '{product.id}' is listed twice"
                )
            seen.add(product.id)
            catalog.append(product)
        return catalog

    def save(self, product: Product) -> None:
        catalog = self.list_all()
        for i, existing in enumerate(catalog):
            if existing.id == product.id:
                catalog[i] = product  # updates keep their catalog position
                break
        else:
            catalog.append(product)
        self._write(catalog)

    # --- Serialization --------------------------------------------------------

    def _to_domain(self, entry: dict, position: int) -> Product:
        try:
            return Product(
                id=str(entry["id"]),
                name=entry["name"],
                price=Money.of(entry["price"], entry.get("currency", "USD")),
            )
        except KeyError as exc:
            raise ValidationError(
                f"{self._file_path.name}: entry {position} has no {exc.args[0]!r}"
            ) from exc

    def _write(self, catalog: list[Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
            }
            for p in catalog
        ]
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
