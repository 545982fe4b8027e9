"""
Output sinks that receive benchmark verdicts.

A sink gets one call per comparison with a human-readable label and the
Verdict. ConsoleSink prints the label followed by the verdict as indented
JSON, for example:

    Function versus memoisation process {
        "fasterFunction": "function",
        "fasterBy": 3.399999976158142
    }
"""

from __future__ import annotations

import json
import logging
import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

from memobench.config import REPORT_INDENT

if TYPE_CHECKING:
    from memobench.benchmark.comparator import Verdict

logger = logging.getLogger(__name__)


def format_verdict(verdict: Verdict, indent: int | None = REPORT_INDENT) -> str:
    """Serialize a verdict to JSON."""
    return json.dumps(verdict.to_dict(), indent=indent)


class OutputSink(ABC):
    """Destination for labelled verdicts."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the sink (e.g., 'console', 'log')."""
        ...

    @abstractmethod
    def emit(self, label: str, verdict: Verdict) -> None:
        """Write one labelled verdict."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class ConsoleSink(OutputSink):
    """Prints verdicts to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def name(self) -> str:
        return "console"

    def emit(self, label: str, verdict: Verdict) -> None:
        # Resolve lazily so pytest's capsys sees the output
        stream = self._stream or sys.stdout
        print(label, format_verdict(verdict), file=stream)


class LoggingSink(OutputSink):
    """Sends verdicts to a logger."""

    def __init__(
        self,
        target_logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self._logger = target_logger or logger
        self._level = level

    @property
    def name(self) -> str:
        return "log"

    def emit(self, label: str, verdict: Verdict) -> None:
        self._logger.log(self._level, f"{label} {format_verdict(verdict, indent=None)}")


class RecordingSink(OutputSink):
    """
    Keeps verdicts in memory.

    Attributes:
        reports: (label, verdict) pairs in emission order
    """

    def __init__(self) -> None:
        self.reports: list[tuple[str, Verdict]] = []

    @property
    def name(self) -> str:
        return "record"

    def emit(self, label: str, verdict: Verdict) -> None:
        self.reports.append((label, verdict))

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.reports]

    @property
    def verdicts(self) -> list[Verdict]:
        return [verdict for _, verdict in self.reports]

    def clear(self) -> None:
        self.reports.clear()
