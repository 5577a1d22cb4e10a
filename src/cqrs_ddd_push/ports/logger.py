"""Diagnostic logger port."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IDiagnosticLogger(Protocol):
    """
    Sink for delivery diagnostics.

    ``logging.Logger`` satisfies this protocol: templates use ``%(key)s``
    placeholders and the context mapping is passed as the single argument.
    """

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Record a non-successful delivery."""
        ...
