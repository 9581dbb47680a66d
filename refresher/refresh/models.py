"""Data models for a refresh run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class LinkOutcome:
    """What happened when a single link was requested.

    Exactly one of ``status_code`` and ``error`` is set: a status code when
    the server answered, an error message when no response was obtained.
    """

    link: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300

    def log_line(self) -> str:
        if self.status_code is None:
            return f"[ERROR] ❌ {self.link}: {self.error}\n"
        marker = "✅" if self.ok else "⚠️"
        return f"[{self.status_code}] {marker} {self.link}\n"


@dataclass
class RunResult:
    """Tally and full text log of one refresh pass."""

    success_count: int = 0
    failure_count: int = 0
    log: str = ""
    outcomes: List[LinkOutcome] = field(default_factory=list)
