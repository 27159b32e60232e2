"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Settings are read on
each call so tests can point ``ORDERDESK_DATA_DIR`` at a temp directory.
"""

from __future__ import annotations

from orderdesk.infrastructure.config import Settings, load_settings
from orderdesk.infrastructure.persistence.json_draft_repository import (
    JsonDraftRepository,
)
from orderdesk.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderdesk.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().products_file)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().orders_file)


def draft_repository() -> JsonDraftRepository:
    return JsonDraftRepository(settings().drafts_file)
