"""Best-effort emission of delivery diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .ports.logger import IDiagnosticLogger

_log = logging.getLogger(__name__)


def emit_warning(
    logger: IDiagnosticLogger | None,
    template: str,
    context: Mapping[str, Any],
) -> None:
    """
    Emit one warning record with a ``%(key)s`` template and its context.

    Logging must never fail a parse, so errors raised by the sink are
    swallowed and reported at debug level on this module's logger.
    """
    target = logger or _log
    try:
        target.warning(template, dict(context))
    except Exception:  # noqa: BLE001
        _log.debug("Failed to emit delivery diagnostic", exc_info=True)
