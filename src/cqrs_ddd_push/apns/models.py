"""Raw APNS batch results as reported by the APNS client error queue."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from operator import attrgetter
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import MalformedResponseError


class ApnsErrorRecord(BaseModel):
    """One error reported for a message, using APNS field names as aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    command: int
    status_code: int = Field(..., alias="statusCode")
    identifier: int
    time: int
    status_message: str = Field(..., alias="statusMessage")

    @property
    def reason(self) -> str | None:
        """``reason`` from a JSON status message, None for plain text messages."""
        try:
            decoded = json.loads(self.status_message)
        except ValueError:
            return None
        if isinstance(decoded, dict) and isinstance(decoded.get("reason"), str):
            return decoded["reason"]
        return None


class ApnsRawResponse(BaseModel):
    """
    Outcome of one APNS batch.

    ``errors`` maps the positional send index of a message to its error
    records; ``recipients`` is the lookup table from that same index to the
    device token the message was addressed to.
    """

    model_config = ConfigDict(frozen=True)

    invalid_endpoints: list[str] = Field(default_factory=list)
    errors: dict[int, list[ApnsErrorRecord]] = Field(default_factory=dict)
    recipients: dict[int, str] = Field(default_factory=dict)

    @classmethod
    def from_error_queue(
        cls,
        error_queue: Mapping[int, Mapping[str, Any]],
        invalid_endpoints: Iterable[str] = (),
        recipient_of: Callable[[Any], str] = attrgetter("recipient"),
    ) -> ApnsRawResponse:
        """
        Build from an APNS client error queue.

        Each queue entry carries the sent ``MESSAGE`` and its ``ERRORS``. The
        recipient of every message is resolved once, here, into the lookup
        table; the parser never touches message objects.
        """
        try:
            return cls(
                invalid_endpoints=list(invalid_endpoints),
                errors={index: list(entry["ERRORS"]) for index, entry in error_queue.items()},
                recipients={
                    index: recipient_of(entry["MESSAGE"]) for index, entry in error_queue.items()
                },
            )
        except (KeyError, AttributeError, ValidationError) as e:
            raise MalformedResponseError("APNS", f"unreadable error queue: {e}") from e
