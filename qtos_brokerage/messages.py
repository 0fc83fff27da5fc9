"""
Policy messages and the result type returned by every brokerage decision.

A PolicyDecision is either accepted (no message) or rejected (with a message).
Callers use the message for diagnostics only; control flow keys off `accepted`.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

# Code used when a venue rejects an order for a reason it does not categorize.
GENERIC_CODE = "0"
NOT_SUPPORTED = "NotSupported"


class PolicyMessageType(Enum):
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class PolicyMessage:
    """Why a venue would reject (or warn about) an order."""

    type: PolicyMessageType
    code: str
    message: str

    @classmethod
    def warning(cls, message: str, code: str = NOT_SUPPORTED) -> PolicyMessage:
        return cls(type=PolicyMessageType.WARNING, code=code, message=message)

    def __str__(self) -> str:
        return f"{self.type.value}: {self.message} ({self.code})"


@dataclass(frozen=True)
class PolicyDecision:
    """
    Outcome of a submit/update check.

    Truthy when accepted. Unpacks as (accepted, message) for callers that
    prefer tuples.
    """

    accepted: bool
    message: PolicyMessage | None = None

    def __post_init__(self) -> None:
        if self.accepted and self.message is not None:
            raise ValueError("an accepted decision cannot carry a message")
        if not self.accepted and self.message is None:
            raise ValueError("a rejected decision requires a message")

    @classmethod
    def accept(cls) -> PolicyDecision:
        return cls(accepted=True)

    @classmethod
    def reject(cls, message: PolicyMessage) -> PolicyDecision:
        return cls(accepted=False, message=message)

    def __bool__(self) -> bool:
        return self.accepted

    def __iter__(self) -> Iterator[object]:
        yield self.accepted
        yield self.message
