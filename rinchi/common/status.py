"""
Status Reporting
================

Replaces a process-wide, reflection-selected logging tool with an
explicitly injected sink.  :func:`rinchi.decompose` records every
message in its own :class:`StatusLog` and forwards it to the sink the
caller passes in (a no-op :class:`NullStatusSink` when none is given).

Usage::

    from rinchi.common.status import LoggingStatusSink, Status

    result = decompose(rinchi, sink=LoggingStatusSink())
    if result.status == Status.ERROR:
        ...
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


class Status(Enum):
    """Outcome of an operation, ordered by severity.

    SUCCESS < WARNING < ERROR; a status log reports the most severe
    status of all recorded messages.
    """

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]


_STATUS_RANK = {Status.SUCCESS: 0, Status.WARNING: 1, Status.ERROR: 2}


def worst_status(messages: Iterable["StatusMessage"]) -> Status:
    """Most severe status among *messages*, SUCCESS if there are none."""
    worst = Status.SUCCESS
    for msg in messages:
        if msg.status.rank > worst.rank:
            worst = msg.status
    return worst


@dataclass(frozen=True)
class StatusMessage:
    """A single recorded message."""

    text: str
    status: Status
    code: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "status": self.status.value, "code": self.code}


class StatusSink(ABC):
    """Receiver of status messages."""

    @abstractmethod
    def add_message(self, text: str, status: Status) -> None:
        """Record *text* with the given *status*."""


class NullStatusSink(StatusSink):
    """Discards every message.  Default sink of :func:`rinchi.decompose`."""

    def add_message(self, text: str, status: Status) -> None:
        return None


class LoggingStatusSink(StatusSink):
    """Forwards messages to a standard-library logger."""

    _LEVELS = {
        Status.SUCCESS: logging.INFO,
        Status.WARNING: logging.WARNING,
        Status.ERROR: logging.ERROR,
    }

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger("rinchi")

    def add_message(self, text: str, status: Status) -> None:
        self.logger.log(self._LEVELS[status], "%s", text)


class StatusLog(StatusSink):
    """Accumulating sink that optionally relays to a downstream sink.

    Messages are append-only; :attr:`messages` returns an immutable copy.
    """

    def __init__(self, relay: Optional[StatusSink] = None) -> None:
        self._messages: List[StatusMessage] = []
        self._relay = relay

    def add_message(self, text: str, status: Status, code: str = "") -> None:
        """Record *text*; *code* is kept locally and not relayed."""
        self._messages.append(StatusMessage(text, status, code))
        if self._relay is not None:
            self._relay.add_message(text, status)

    @property
    def messages(self) -> Tuple[StatusMessage, ...]:
        return tuple(self._messages)

    @property
    def status(self) -> Status:
        return worst_status(self._messages)
