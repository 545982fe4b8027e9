"""
Report module.

Provides sinks for benchmark verdicts:
- ConsoleSink: Prints label + JSON verdict
- LoggingSink: Logs label + JSON verdict
- RecordingSink: Keeps verdicts in memory
- get_sink / get_output_sink: Build a sink by name
"""

from memobench.config import OUTPUT_SINKS
from memobench.report.sinks import (
    ConsoleSink,
    LoggingSink,
    OutputSink,
    RecordingSink,
    format_verdict,
)

__all__ = [
    "OutputSink",
    "ConsoleSink",
    "LoggingSink",
    "RecordingSink",
    "format_verdict",
    "get_sink",
    "get_output_sink",
]


def get_sink(name: str, **kwargs) -> OutputSink:
    """
    Get an output sink by name.

    Args:
        name: Sink identifier (console, log, record)
        **kwargs: Additional arguments passed to the sink constructor

    Returns:
        Instantiated sink

    Raises:
        ValueError: If sink name is unknown
    """
    sinks = {
        "console": ConsoleSink,
        "log": LoggingSink,
        "record": RecordingSink,
    }

    if name not in sinks:
        available = ", ".join(sinks.keys())
        raise ValueError(f"Unknown sink '{name}'. Available: {available}")

    return sinks[name](**kwargs)


def get_output_sink(name: str, **kwargs) -> OutputSink:
    """
    Get a sink that writes verdicts where they can be read (console, log).

    RecordingSink is excluded: verdicts sent to it are only visible to code
    holding the sink, so it cannot serve as a configured default.

    Raises:
        ValueError: If name is not one of OUTPUT_SINKS
    """
    if name not in OUTPUT_SINKS:
        available = ", ".join(OUTPUT_SINKS)
        raise ValueError(f"Sink '{name}' is not an output sink. Available: {available}")

    return get_sink(name, **kwargs)
