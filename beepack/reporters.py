"""Failure collaborators consumed by assertion contexts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class FailureReporter(Protocol):
    """Receives the output of failed assertions.

    ``fail`` marks the current test as failed without stopping it; ``log``
    records informational output.
    """

    def fail(self, message: str) -> None: ...

    def log(self, message: str) -> None: ...


@dataclass(slots=True)
class RecordingReporter:
    """Collects failures and logs in memory."""

    failures: list[str] = field(default_factory=list)
    logs: list[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def fail(self, message: str) -> None:
        self.failures.append(message)

    def log(self, message: str) -> None:
        self.logs.append(message)

    def clear(self) -> None:
        self.failures.clear()
        self.logs.clear()

    def summary(self) -> str:
        lines = list(self.failures)
        lines.extend(self.logs)
        return "\n".join(lines)
