"""Value objects exchanged between the stores and the deduplicators."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Hashable

from app.utils import as_utc


@dataclass(frozen=True)
class GroupMember:
    """A single record inside a duplicate group."""

    id: int
    created_at: datetime


@dataclass
class DuplicateGroup:
    """Records sharing the same identity key.

    ``ids`` and ``created_ats`` are parallel lists in storage order.
    """

    key: tuple[Hashable, ...]
    ids: list[int] = field(default_factory=list)
    created_ats: list[datetime] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.ids)

    def add(self, record_id: int, created_at: datetime) -> None:
        self.ids.append(record_id)
        self.created_ats.append(created_at)

    def sorted_members(self) -> list[GroupMember]:
        """Return the members oldest first; ties resolve to the smallest id."""

        members = [
            GroupMember(id=record_id, created_at=created_at)
            for record_id, created_at in zip(self.ids, self.created_ats)
        ]
        return sorted(members, key=lambda member: (as_utc(member.created_at), member.id))


__all__ = ["DuplicateGroup", "GroupMember"]
