"""Diagnostics sinks for non-fatal token metadata errors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol


class Reporter(Protocol):
    """Collector for errors that are reported but never raised to callers."""

    def error(self, message: str, exc: BaseException | None = None) -> None: ...


class LoggingReporter:
    """Forward diagnostics to the standard :mod:`logging` tree."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("wallet_tokens.diagnostics")

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self.logger.error("%s: %s", message, exc)
        else:
            self.logger.error(message)


@dataclass(frozen=True)
class Diagnostic:
    message: str
    exc: BaseException | None = None


class RecordingReporter:
    """Keep diagnostics in memory; handy for tests and CLI summaries."""

    def __init__(self) -> None:
        self.entries: list[Diagnostic] = []

    def error(self, message: str, exc: BaseException | None = None) -> None:
        self.entries.append(Diagnostic(message, exc))

    @property
    def messages(self) -> list[str]:
        return [entry.message for entry in self.entries]


__all__ = ["Diagnostic", "LoggingReporter", "RecordingReporter", "Reporter"]
