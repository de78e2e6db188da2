"""History record model.

Records serialize with the keys ``from``, ``to``, ``timestamp`` and
``date`` so stored logs stay readable by earlier versions.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class HistoryRecord(BaseModel):
    """One completed conversion, as shown in the history list."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_label: str = Field(alias="from")
    to_label: str = Field(alias="to")
    timestamp: str
    date: str

    @classmethod
    def stamped(cls, from_label: str, to_label: str, when: datetime) -> HistoryRecord:
        """Build a record whose time and date are formatted from *when*."""
        return cls(
            from_label=from_label,
            to_label=to_label,
            timestamp=when.strftime("%X"),
            date=when.strftime("%x"),
        )


HISTORY_LOG_ADAPTER: TypeAdapter[list[HistoryRecord]] = TypeAdapter(list[HistoryRecord])
