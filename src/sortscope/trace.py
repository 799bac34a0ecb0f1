# src/sortscope/trace.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Iterable, List, Sequence, Tuple, Union

# Shown in the "Compared With" column when the opposing merge run is exhausted.
NO_VALUE = "—"

Number = Union[int, float]


class InvalidInput(ValueError):
    """
    Raised when a sequence cannot be traced or user text cannot be parsed.

    ``title`` is a short heading suitable for an alert box; ``message`` is the
    user-facing explanation.
    """

    def __init__(self, message: str, title: str = "Invalid Input") -> None:
        super().__init__(message)
        self.message = message
        self.title = title


class Decision(str, Enum):
    SWAP = "Swap"
    KEEP_ORDER = "Keep Order"
    SHIFT_RIGHT = "Shift Right"
    CHOOSE_LEFT = "Choose Left"
    CHOOSE_RIGHT = "Choose Right"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Element:
    value: Number
    index: int  # position in the original input, never the current slot


@dataclass(frozen=True)
class StepRecord:
    step: int
    index: int
    value: Number
    compare: Union[Number, str]
    decision: Decision

    def as_row(self) -> dict:
        return {
            "step": self.step,
            "index": self.index,
            "value": self.value,
            "compare": self.compare,
            "decision": self.decision.value,
        }


@dataclass
class RunResult:
    algorithm: str
    sorted_values: List[Number]
    steps: List[StepRecord] = field(default_factory=list)
    order: List[int] = field(default_factory=list)  # original indices, final positions

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def decisions(self) -> List[Decision]:
        return [s.decision for s in self.steps]


def validate_values(values: Iterable[Number]) -> Tuple[Number, ...]:
    """
    Snapshot ``values`` into a tuple after checking the tracing precondition:
    at least two finite real numbers. Booleans are rejected even though they
    are ``int`` subclasses.
    """
    if isinstance(values, (str, bytes)):
        raise InvalidInput("Expected a sequence of numbers, got text. Use parse_numbers() first.")
    snapshot = tuple(values)
    for v in snapshot:
        if isinstance(v, bool) or not isinstance(v, Real):
            raise InvalidInput(f"{v!r} is not a valid number.")
        if not math.isfinite(v):
            raise InvalidInput(f"{v!r} is not a finite number.")
    if len(snapshot) < 2:
        raise InvalidInput(
            "Please enter at least 2 numbers to see sorting in action.", title="Input Required"
        )
    return snapshot


def to_elements(values: Sequence[Number]) -> List[Element]:
    return [Element(value=v, index=i) for i, v in enumerate(values)]
