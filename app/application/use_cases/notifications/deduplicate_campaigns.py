"""Use case that removes repeated notification campaigns."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

import logging

from sqlalchemy.orm import Session

from app.domain.entities import DuplicateGroup
from app.infrastructure.repositories import NotificationCampaignRepository

logger = logging.getLogger(__name__)


class CampaignStore(Protocol):
    def query_grouped_by_identity(self) -> list[DuplicateGroup]: ...

    def delete_by_ids(self, ids: Iterable[int]) -> int: ...


@dataclass(frozen=True)
class CampaignDeduplicationResult:
    deleted_campaigns_count: int


class CampaignDeduplicator:
    """Keep the oldest campaign of every identity group and delete the rest.

    The whole campaign history is scanned; identical content sent to the
    same audience is never a legitimate repeat, however far apart in time.
    """

    def __init__(self, store: CampaignStore) -> None:
        self._store = store

    def run(self) -> CampaignDeduplicationResult:
        deleted_total = 0
        groups = self._store.query_grouped_by_identity()
        for group in groups:
            if len(group) < 2:
                continue
            members = group.sorted_members()
            ids_to_delete = [member.id for member in members[1:]]
            deleted = self._store.delete_by_ids(ids_to_delete)
            if deleted != len(ids_to_delete):
                logger.warning(
                    "Campaign group %s: expected to delete %s records but the store removed %s",
                    group.key,
                    len(ids_to_delete),
                    deleted,
                )
            deleted_total += deleted

        logger.info(
            "Campaign deduplication removed %s records from %s duplicate groups",
            deleted_total,
            len(groups),
        )
        return CampaignDeduplicationResult(deleted_campaigns_count=deleted_total)


def deduplicate_campaigns(session: Session) -> CampaignDeduplicationResult:
    """Delete every non-canonical campaign stored in the database."""

    return CampaignDeduplicator(NotificationCampaignRepository(session)).run()


__all__ = [
    "CampaignDeduplicationResult",
    "CampaignDeduplicator",
    "CampaignStore",
    "deduplicate_campaigns",
]
