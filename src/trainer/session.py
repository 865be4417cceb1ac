"""
Training session state and transitions.

Flow:
    NOT_STARTED -> (deal) -> AWAITING_ACTION -> (submit) -> RESULT_SHOWN
                 -> (deal) -> AWAITING_ACTION -> ...

SessionState is an immutable value. The transition functions take a state
and return a new one; nothing else mutates it:
    deal_next_hand(state)          new hand, seat moves one step
    submit_action(state, action)   grade against the strategy table
    reset_stats(state)             zero the counters only

Submitting when there is no hand to answer (before the first deal, or after
the result is already shown) is ignored: the state comes back unchanged and
no verdict is produced.

TrainingSession wraps one SessionState for a front end that wants plain
method calls, and keeps an in-memory history of verdicts.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from types import MappingProxyType

import numpy as np

from src.engine.deck import deal_hole_cards
from src.engine.hand import Hand
from src.engine.positions import POSITION_INFO, ROTATION, STARTING_POSITION, Position, PositionInfo, next_position
from src.strategy.ranges import default_strategy_table
from src.strategy.table import Action, StrategyEntry, StrategyTable

LOGGER = logging.getLogger(__name__)


# ─── Enumerations ─────────────────────────────────────────────────────────────

class Phase(Enum):
    NOT_STARTED = auto()
    AWAITING_ACTION = auto()
    RESULT_SHOWN = auto()


# ─── State / Result types ──────────────────────────────────────────────────────

def accuracy(correct: int, total: int) -> int:
    """Percentage of correct answers, rounded half up; 0 when nothing answered.

    Examples:
        >>> accuracy(1, 2)
        50
        >>> accuracy(1, 8)   # 12.5 rounds up
        13
        >>> accuracy(0, 0)
        0
    """
    if total <= 0:
        return 0
    return (200 * correct + total) // (2 * total)


@dataclass(frozen=True)
class SessionStats:
    correct: int = 0
    total: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.correct <= self.total:
            raise ValueError(f"Invalid stats: correct={self.correct}, total={self.total}")

    @property
    def accuracy(self) -> int:
        return accuracy(self.correct, self.total)

    def record(self, is_correct: bool) -> SessionStats:
        return SessionStats(self.correct + int(is_correct), self.total + 1)

    def __str__(self) -> str:
        return f"{self.correct}/{self.total} ({self.accuracy}%)"


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot of one training session."""
    hand: Hand | None = None
    position: Position = STARTING_POSITION
    last_action: Action | None = None
    result_revealed: bool = False
    stats: SessionStats = field(default_factory=SessionStats)
    started: bool = False

    @property
    def phase(self) -> Phase:
        if not self.started or self.hand is None:
            return Phase.NOT_STARTED
        return Phase.RESULT_SHOWN if self.result_revealed else Phase.AWAITING_ACTION

    @property
    def accuracy(self) -> int:
        return self.stats.accuracy


@dataclass(frozen=True)
class Verdict:
    """Grading of one submitted action."""
    hand: Hand
    position: Position
    action: Action
    entry: StrategyEntry
    is_correct: bool
    is_fallback: bool  # True if graded against the position's default entry

    def __str__(self) -> str:
        mark = "correct" if self.is_correct else "incorrect"
        return (
            f"{self.position.value} {self.hand.hand_class}: you chose {self.action.value}, "
            f"GTO recommends {self.entry.action.value} ({self.entry.frequency}%) - {mark}"
        )


# ─── Transitions ──────────────────────────────────────────────────────────────

def initial_state() -> SessionState:
    return SessionState()


def deal_next_hand(
    state: SessionState,
    rng: np.random.Generator | None = None,
    hole_cards: tuple[int, int] | None = None,
) -> SessionState:
    """Deal a new hand and move the hero one seat along the rotation.

    Args:
        state:      Current session state.
        rng:        Generator for the shuffle. Defaults to the deck module's.
        hole_cards: Optional pre-set cards (used by tests and replays).
                    If None, a fresh deck is shuffled and the top two dealt.

    Returns:
        New state with the hand set, position advanced, last action cleared
        and the result hidden. Stats are carried over.
    """
    if state.phase is Phase.AWAITING_ACTION:
        LOGGER.debug("Skipping unanswered hand %s", state.hand.hand_class)  # type: ignore[union-attr]

    cards = hole_cards if hole_cards is not None else deal_hole_cards(rng)
    hand = Hand.from_cards(*cards)
    position = next_position(state.position)
    LOGGER.debug("Dealt %s at %s", hand, position.value)
    return replace(
        state,
        hand=hand,
        position=position,
        last_action=None,
        result_revealed=False,
        started=True,
    )


def submit_action(
    state: SessionState,
    action: Action | str,
    table: StrategyTable,
) -> tuple[SessionState, Verdict | None]:
    """Grade *action* for the current hand and update the stats.

    Returns:
        (new_state, verdict). When there is no hand awaiting an answer the
        input state is returned unchanged with verdict None.
    """
    action = Action.parse(action)
    if state.phase is not Phase.AWAITING_ACTION:
        LOGGER.debug("Ignoring %s: no hand awaiting an action (%s)", action.value, state.phase.name)
        return state, None

    hand = state.hand
    assert hand is not None
    entry, is_fallback = table.resolve(state.position, hand.hand_class)
    is_correct = action is entry.action

    new_state = replace(
        state,
        last_action=action,
        result_revealed=True,
        stats=state.stats.record(is_correct),
    )
    verdict = Verdict(
        hand=hand,
        position=state.position,
        action=action,
        entry=entry,
        is_correct=is_correct,
        is_fallback=is_fallback,
    )
    LOGGER.debug("%s | stats %s", verdict, new_state.stats)
    return new_state, verdict


def reset_stats(state: SessionState) -> SessionState:
    """Zero the counters; hand, position and reveal flag are untouched."""
    return replace(state, stats=SessionStats())


# ─── Session owner ────────────────────────────────────────────────────────────

class TrainingSession:
    """One interactive drill: owns a SessionState and the table it grades against.

    Args:
        table: Strategy table to grade with. Defaults to the built-in ranges.
        rng:   Generator used for shuffling.
        seed:  Seed for a fresh generator when *rng* is not given.
    """

    def __init__(
        self,
        table: StrategyTable | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        self.table = table if table is not None else default_strategy_table()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.state = initial_state()
        self.history: list[Verdict] = []

    def deal_next_hand(self, hole_cards: tuple[int, int] | None = None) -> tuple[Hand, Position]:
        self.state = deal_next_hand(self.state, self.rng, hole_cards)
        assert self.state.hand is not None
        return self.state.hand, self.state.position

    def submit_action(self, action: Action | str) -> Verdict | None:
        self.state, verdict = submit_action(self.state, action, self.table)
        if verdict is not None:
            self.history.append(verdict)
        return verdict

    def reset_stats(self) -> None:
        self.state = reset_stats(self.state)
        self.history.clear()

    def get_stats(self) -> SessionStats:
        return self.state.stats

    def get_accuracy(self) -> int:
        return self.state.stats.accuracy

    def stats_by_position(self) -> dict[Position, SessionStats]:
        """Per-seat breakdown of the verdicts recorded since the last reset."""
        correct: Counter[Position] = Counter()
        total: Counter[Position] = Counter()
        for verdict in self.history:
            total[verdict.position] += 1
            correct[verdict.position] += int(verdict.is_correct)
        return {p: SessionStats(correct[p], total[p]) for p in ROTATION}

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def positions(self) -> Mapping[Position, PositionInfo]:
        """Read-only seat metadata."""
        return MappingProxyType(POSITION_INFO)
