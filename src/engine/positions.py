"""
Six-max table positions and the fixed seat rotation.

The trainer moves the hero one seat per deal in the order
    BTN -> CO -> HJ -> MP -> BB -> SB -> BTN ...
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Position(Enum):
    BTN = "BTN"
    CO = "CO"
    HJ = "HJ"
    MP = "MP"
    BB = "BB"
    SB = "SB"

    @classmethod
    def parse(cls, value: Position | str) -> Position:
        """Accept a Position or its short name ('btn', 'CO', ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown position: {value!r}") from None


class PositionInfo(NamedTuple):
    """Display metadata for a seat."""
    name: str
    full_name: str
    description: str


POSITION_INFO: dict[Position, PositionInfo] = {
    Position.BTN: PositionInfo("BTN", "Button", "Best position - acts last postflop"),
    Position.CO: PositionInfo("CO", "Cutoff", "Second best position"),
    Position.HJ: PositionInfo("HJ", "Hijack", "Middle-late position"),
    Position.MP: PositionInfo("MP", "Middle Position", "Early-middle position"),
    Position.BB: PositionInfo("BB", "Big Blind", "Forced bet - acts last preflop"),
    Position.SB: PositionInfo("SB", "Small Blind", "Worst position - acts first postflop"),
}

ROTATION: tuple[Position, ...] = (
    Position.BTN,
    Position.CO,
    Position.HJ,
    Position.MP,
    Position.BB,
    Position.SB,
)

STARTING_POSITION: Position = Position.BTN


def next_position(position: Position) -> Position:
    """Return the seat after *position* in the rotation, wrapping SB -> BTN.

    Examples:
        >>> next_position(Position.BTN)
        <Position.CO: 'CO'>
        >>> next_position(Position.SB)
        <Position.BTN: 'BTN'>
    """
    return ROTATION[(ROTATION.index(position) + 1) % len(ROTATION)]


def position_info(position: Position | str) -> PositionInfo:
    return POSITION_INFO[Position.parse(position)]
