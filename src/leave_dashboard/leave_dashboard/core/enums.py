from __future__ import annotations

from enum import IntEnum


class AbsenceStatus(IntEnum):
    """Status ids of absence request lines as stored by the sync."""

    REQUESTED = 1
    APPROVED = 2
    REJECTED = 3

    @classmethod
    def counted(cls) -> tuple["AbsenceStatus", ...]:
        """Statuses whose lines are reported as leave."""

        return (cls.REQUESTED, cls.APPROVED)
