"""
Preflop strategy table: (position, hand class) -> recommended action.

Table shape:
    {Position: {hand_class: StrategyEntry, ..., "default": StrategyEntry}}

Every position must carry a "default" entry. This is checked once when the
table is built, so lookup() is a total function afterwards: any string that
has no exact entry resolves to the position's default.

JSON form (load_strategy_table / save_strategy_table):
    {"BTN": {"AA": {"action": "raise", "frequency": 100, "rationale": "..."},
             "default": {"action": "fold", "frequency": 60, "rationale": "..."}},
     "CO": {...}, ...}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from src.engine.hand import is_valid_hand_class
from src.engine.positions import ROTATION, Position

LOGGER = logging.getLogger(__name__)

DEFAULT_KEY: str = "default"


class Action(Enum):
    FOLD = "fold"
    CALL = "call"
    RAISE = "raise"

    @classmethod
    def parse(cls, value: Action | str) -> Action:
        """Accept an Action or its name in any case ('raise', 'RAISE', ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown action: {value!r}") from None


@dataclass(frozen=True)
class StrategyEntry:
    """Recommended action for one hand class at one position.

    Attributes:
        action:    The action graded as correct.
        frequency: How often the recommended action is taken, in percent (0–100).
        rationale: Short explanation shown after the user answers.
    """
    action: Action
    frequency: int
    rationale: str

    def __post_init__(self) -> None:
        if not isinstance(self.action, Action):
            raise ValueError(f"action must be an Action, got {self.action!r}")
        if isinstance(self.frequency, bool) or not isinstance(self.frequency, int):
            raise ValueError(f"frequency must be an integer percent, got {self.frequency!r}")
        if not 0 <= self.frequency <= 100:
            raise ValueError(f"frequency must be in 0-100, got {self.frequency}")

    @classmethod
    def from_dict(cls, raw: Mapping[str, object]) -> StrategyEntry:
        """Build an entry from plain data; frequency must already be an int.

        Raises:
            KeyError:   If "action" or "frequency" is missing.
            ValueError: If the data is not a mapping or a field is invalid.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"Strategy entry must be a mapping, got {type(raw).__name__}")
        rationale = raw.get("rationale", raw.get("reasoning", ""))
        return cls(
            action=Action.parse(raw["action"]),  # type: ignore[arg-type]
            frequency=raw["frequency"],  # type: ignore[arg-type]
            rationale=str(rationale),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "action": self.action.value,
            "frequency": self.frequency,
            "rationale": self.rationale,
        }


class MissingDefaultEntryError(ValueError):
    """Raised when a position's sub-table has no "default" entry."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"Strategy table for {position.value} has no '{DEFAULT_KEY}' entry")
        self.position = position


class StrategyTable:
    """Validated, read-only strategy lookup table.

    Args:
        ranges: Mapping of Position to {hand_class or "default": StrategyEntry}.

    Raises:
        MissingDefaultEntryError: If any of the six positions is absent or has
            no "default" entry.
        ValueError: If a key is neither "default" nor a canonical hand class,
            or a value is not a StrategyEntry.
    """

    def __init__(self, ranges: Mapping[Position, Mapping[str, StrategyEntry]]) -> None:
        tables: dict[Position, Mapping[str, StrategyEntry]] = {}
        for position in ROTATION:
            sub_table = ranges.get(position)
            if sub_table is None:
                raise MissingDefaultEntryError(position)
            if not isinstance(sub_table, Mapping):
                raise ValueError(
                    f"Strategy table for {position.value} must be a mapping, "
                    f"got {type(sub_table).__name__}"
                )
            if DEFAULT_KEY not in sub_table:
                raise MissingDefaultEntryError(position)
            for key, entry in sub_table.items():
                if key != DEFAULT_KEY and not is_valid_hand_class(key):
                    raise ValueError(
                        f"Strategy table for {position.value} has invalid hand class {key!r}"
                    )
                if not isinstance(entry, StrategyEntry):
                    raise ValueError(
                        f"Strategy table for {position.value} has a non-StrategyEntry value "
                        f"for {key!r}: {entry!r}"
                    )
            tables[position] = MappingProxyType(dict(sub_table))
        self._tables = tables
        LOGGER.debug(
            "Built strategy table: %s",
            ", ".join(f"{p.value}={len(t) - 1}" for p, t in tables.items()),
        )

    # ── Lookup ────────────────────────────────────────────────────────────────

    def lookup(self, position: Position, hand_class: str) -> StrategyEntry:
        """Return the entry for *hand_class* at *position*, else the default."""
        return self.resolve(position, hand_class)[0]

    def resolve(self, position: Position, hand_class: str) -> tuple[StrategyEntry, bool]:
        """Like lookup(), but also report whether the default entry was used."""
        sub_table = self._tables[position]
        entry = sub_table.get(hand_class) if hand_class != DEFAULT_KEY else None
        if entry is None:
            LOGGER.debug("No %s entry for %s, using default", position.value, hand_class)
            return sub_table[DEFAULT_KEY], True
        return entry, False

    def has_entry(self, position: Position, hand_class: str) -> bool:
        return hand_class != DEFAULT_KEY and hand_class in self._tables[position]

    def default_entry(self, position: Position) -> StrategyEntry:
        return self._tables[position][DEFAULT_KEY]

    def entries(self, position: Position) -> Mapping[str, StrategyEntry]:
        """Read-only view of a position's explicit entries, "default" included."""
        return self._tables[position]

    @property
    def positions(self) -> tuple[Position, ...]:
        return tuple(self._tables)

    # ── Serialisation ─────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, raw: Mapping[str, Mapping[str, Mapping[str, object]]]) -> StrategyTable:
        """Build a table from plain data keyed by position name.

        Raises:
            ValueError: On unknown positions, actions, or malformed entries.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"Strategy table must be a mapping, got {type(raw).__name__}")
        ranges: dict[Position, dict[str, StrategyEntry]] = {}
        for position_name, sub_table in raw.items():
            position = Position.parse(position_name)
            if not isinstance(sub_table, Mapping):
                raise ValueError(
                    f"Strategy table for {position.value} must be a mapping, "
                    f"got {type(sub_table).__name__}"
                )
            entries: dict[str, StrategyEntry] = {}
            for key, entry in sub_table.items():
                try:
                    entries[key] = StrategyEntry.from_dict(entry)
                except KeyError as exc:
                    raise ValueError(
                        f"Strategy entry {position.value}/{key} is missing field {exc}"
                    ) from exc
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"Strategy entry {position.value}/{key} is invalid: {exc}") from exc
            ranges[position] = entries
        return cls(ranges)

    def to_dict(self) -> dict[str, dict[str, dict[str, object]]]:
        return {
            position.value: {key: entry.to_dict() for key, entry in sub_table.items()}
            for position, sub_table in self._tables.items()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrategyTable):
            return NotImplemented
        return {p: dict(t) for p, t in self._tables.items()} == {
            p: dict(t) for p, t in other._tables.items()
        }

    def __repr__(self) -> str:
        n_entries = sum(len(t) - 1 for t in self._tables.values())
        return f"StrategyTable(positions={len(self._tables)}, entries={n_entries})"


def load_strategy_table(path: str | Path) -> StrategyTable:
    """Load and validate a strategy table from a JSON file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    table = StrategyTable.from_dict(raw)
    LOGGER.info("Loaded strategy table from %s: %r", path, table)
    return table


def save_strategy_table(table: StrategyTable, path: str | Path) -> None:
    """Write *table* as indented JSON."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(table.to_dict(), f, indent=2, ensure_ascii=False)
    LOGGER.info("Saved strategy table to %s", path)
