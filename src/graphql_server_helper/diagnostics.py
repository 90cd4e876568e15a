"""Diagnostics

Capturing of non-fatal runtime warnings emitted while resolvers are executed.
"""

import logging
import warnings
from contextlib import contextmanager
from contextvars import ContextVar
from threading import Lock
from traceback import extract_stack
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Type

from .error import format_stack

__all__ = ["DiagnosticRecord", "DiagnosticSink", "warning_severity"]


_deprecation_categories = (DeprecationWarning, PendingDeprecationWarning)


def warning_severity(category: Type[Warning]) -> int:
    """Get the logging level corresponding to the given warning category."""
    if issubclass(category, _deprecation_categories):
        return logging.INFO
    return logging.WARNING


class DiagnosticRecord(NamedTuple):
    """A non-fatal diagnostic emitted during execution."""

    message: str
    severity: int
    category: str
    trace: List[str]

    @property
    def formatted(self) -> Dict[str, Any]:
        """Get the diagnostic formatted for the result extensions."""
        return {
            "message": self.message,
            "severity": self.severity,
            "category": self.category,
            "trace": self.trace,
        }


class DiagnosticSink:
    """Collector of diagnostics for one request.

    The sink is created before execution starts and drained after execution ended.
    While :meth:`capture` is active, every warning is recorded in emission order,
    instead of being printed or turned into an exception by the warning filters.
    """

    records: List[DiagnosticRecord]

    __slots__ = ("records",)

    def __init__(self) -> None:
        self.records = []

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    def record(
        self,
        message: str,
        severity: int = logging.WARNING,
        category: str = "UserWarning",
        trace: Optional[List[str]] = None,
    ) -> DiagnosticRecord:
        """Add a diagnostic to the sink."""
        record = DiagnosticRecord(message, severity, category, trace or [])
        self.records.append(record)
        return record

    @contextmanager
    def capture(self) -> Iterator["DiagnosticSink"]:
        """Intercept all warnings emitted in the managed block.

        Warnings are routed to the sink of the current context, so that requests
        executed concurrently in different threads never see each other's
        warnings. The warnings module state is global to the process, though:
        while any capture is active, warnings emitted outside of a capture are
        passed on to the previous hook without being deduplicated.
        """
        _install_hook()
        token = _current_sink.set(self)
        try:
            yield self
        finally:
            _current_sink.reset(token)
            _uninstall_hook()

    @property
    def formatted(self) -> List[Dict[str, Any]]:
        """Get all collected diagnostics formatted for the result extensions."""
        return [record.formatted for record in self.records]


_current_sink: "ContextVar[Optional[DiagnosticSink]]" = ContextVar(
    "diagnostic_sink", default=None
)

_hook_lock = Lock()
_hook_users = 0
_hook_catcher: Optional[warnings.catch_warnings] = None
_previous_show_warning: Any = None


def _install_hook() -> None:
    """Install the shared warning hook if no capture is active yet."""
    global _hook_users, _hook_catcher, _previous_show_warning
    with _hook_lock:
        if not _hook_users:
            _previous_show_warning = warnings.showwarning
            catcher = warnings.catch_warnings()
            catcher.__enter__()
            warnings.simplefilter("always")
            warnings.showwarning = _show_warning
            _hook_catcher = catcher
        _hook_users += 1


def _uninstall_hook() -> None:
    """Restore the warnings machinery when the last capture has been left."""
    global _hook_users, _hook_catcher
    with _hook_lock:
        _hook_users -= 1
        if not _hook_users:
            catcher, _hook_catcher = _hook_catcher, None
            if catcher is not None:
                catcher.__exit__(None, None, None)


def _show_warning(
    message: Any,
    category: Type[Warning],
    filename: str,
    lineno: int,
    file: Any = None,
    line: Optional[str] = None,
) -> None:
    sink = _current_sink.get()
    if sink is None:
        _previous_show_warning(message, category, filename, lineno, file, line)
        return
    stack = extract_stack()[:-1]
    # leave out the frames of the warnings machinery
    frames = [frame for frame in stack if frame.filename != warnings.__file__]
    sink.record(
        str(message),
        warning_severity(category),
        category.__name__,
        format_stack(frames),
    )
