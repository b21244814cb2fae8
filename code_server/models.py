"""Value types for issued codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Code:
    value: str
    created_at: datetime = field(default_factory=_utc_now)
