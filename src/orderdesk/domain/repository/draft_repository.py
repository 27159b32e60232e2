"""Abstract repository for OrderDraft aggregate.

Each draft belongs to exactly one user session, so implementations need
no locking; the last save wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.draft import OrderDraft


class DraftRepository(ABC):

    @abstractmethod
    def get_by_id(self, draft_id: int) -> OrderDraft | None:
        """Return a draft by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[OrderDraft]:
        """Return every stored draft, oldest first."""

    @abstractmethod
    def save(self, draft: OrderDraft) -> None:
        """Persist a new or updated draft, assigning an ID if needed."""

    @abstractmethod
    def delete(self, draft_id: int) -> None:
        """Discard a draft. Deleting an unknown ID is a no-op."""
