"""Application service: Cancel Draft use case.

Cancelling throws an editable draft away.  A persisted order the draft was
loaded from is left exactly as it was.
"""

from __future__ import annotations

import logging

from orderdesk.domain.exceptions import EntityNotFoundError
from orderdesk.domain.repository.draft_repository import DraftRepository

logger = logging.getLogger(__name__)


class CancelDraftHandler:

    def __init__(self, draft_repo: DraftRepository) -> None:
        self._draft_repo = draft_repo

    def handle(self, draft_id: int) -> None:
        draft = self._draft_repo.get_by_id(draft_id)
        if draft is None:
            raise EntityNotFoundError(f"Draft #{draft_id} not found")

        draft.ensure_editable()
        self._draft_repo.delete(draft_id)
        logger.info("Draft #%s discarded", draft_id)


class PruneDraftsHandler:
    """Delete submitted drafts; their orders live on in the order store."""

    def __init__(self, draft_repo: DraftRepository) -> None:
        self._draft_repo = draft_repo

    def handle(self) -> list[int]:
        pruned: list[int] = []
        for draft in self._draft_repo.list_all():
            if draft.is_editable:
                continue
            self._draft_repo.delete(draft.id)  # type: ignore[arg-type]
            pruned.append(draft.id)  # type: ignore[arg-type]

        logger.info("Pruned %d submitted draft(s)", len(pruned))
        return pruned
