"""
Monte Carlo drill simulator.

Plays many training hands through the session state machine with a scripted
player and accumulates the grading results: overall accuracy with a 95%
confidence interval and a per-seat breakdown.

Primary use: cross-validate the analytic, combo-weighted expectation from
expected_accuracy() against real shuffled deals, and sanity-check the
engine end to end (a player who always follows the table must score 100%).

Player policies are callables (hand, position) -> Action:
    make_table_policy(table)      — always answers the table's action
    make_fixed_policy(action)     — always the same action
    make_random_policy(seed)      — uniform over fold / call / raise
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from src.engine.hand import ALL_HAND_CLASSES, TOTAL_COMBOS, Hand, combo_count
from src.engine.positions import ROTATION, Position
from src.strategy.ranges import default_strategy_table
from src.strategy.table import Action, StrategyTable
from src.trainer.session import SessionStats, accuracy, deal_next_hand, initial_state, submit_action

# player_policy(hand, position) -> Action
PlayerPolicy = Callable[[Hand, Position], Action]


# ─── Result type ──────────────────────────────────────────────────────────────


@dataclass
class DrillResult:
    """Aggregate statistics from a simulated drill.

    Attributes:
        n_hands:     Number of hands answered.
        n_correct:   Hands graded correct.
        hit_rate:    n_correct / n_hands as a fraction.
        ci_95_low:   Lower bound of the 95% confidence interval for hit_rate.
        ci_95_high:  Upper bound of the 95% confidence interval for hit_rate.
        by_position: Per-seat SessionStats.
        n_fallback:  Hands graded against a seat's default entry.
    """

    n_hands: int
    n_correct: int
    hit_rate: float
    ci_95_low: float
    ci_95_high: float
    by_position: dict[Position, SessionStats]
    n_fallback: int

    @property
    def accuracy(self) -> int:
        """Rounded percentage, as shown in the trainer."""
        return accuracy(self.n_correct, self.n_hands)

    def __str__(self) -> str:
        return (
            f"Hands: {self.n_hands:,} | "
            f"Correct: {self.n_correct:,} ({self.hit_rate * 100:.2f}%) | "
            f"95% CI: [{self.ci_95_low * 100:.2f}%, {self.ci_95_high * 100:.2f}%] | "
            f"Default-graded: {self.n_fallback:,}"
        )


# ─── Policies ─────────────────────────────────────────────────────────────────


def make_table_policy(table: StrategyTable) -> PlayerPolicy:
    """Return a policy that always answers the table's recommended action."""

    def _policy(hand: Hand, position: Position) -> Action:
        return table.lookup(position, hand.hand_class).action

    return _policy


def make_fixed_policy(action: Action) -> PlayerPolicy:
    """Return a policy that answers *action* for every hand."""

    def _policy(hand: Hand, position: Position) -> Action:
        return action

    return _policy


def make_random_policy(seed: int | None = None) -> PlayerPolicy:
    """Return a policy that picks fold / call / raise uniformly at random."""
    rng = np.random.default_rng(seed)
    actions = list(Action)

    def _policy(hand: Hand, position: Position) -> Action:
        return actions[int(rng.integers(0, len(actions)))]

    return _policy


# ─── Analytic expectation ─────────────────────────────────────────────────────


def expected_accuracy(
    table: StrategyTable,
    action: Action,
    positions: tuple[Position, ...] = ROTATION,
) -> float:
    """Expected hit rate of always answering *action*, as a fraction.

    Each hand class is weighted by its combo count; seats are weighted
    equally, which is what the rotation produces over whole cycles.
    """
    total = 0.0
    for position in positions:
        combos = sum(
            combo_count(label)
            for label in ALL_HAND_CLASSES
            if table.lookup(position, label).action is action
        )
        total += combos / TOTAL_COMBOS
    return total / len(positions)


# ─── Core simulation loop ─────────────────────────────────────────────────────


def simulate_drill(
    player_policy: PlayerPolicy,
    n_hands: int = 10_000,
    seed: int | None = 42,
    table: StrategyTable | None = None,
) -> DrillResult:
    """Run *n_hands* of deal -> answer -> grade and return aggregate statistics.

    Args:
        player_policy: Callable matching PlayerPolicy.
        n_hands:       Number of hands to play.
        seed:          Seed for the shuffling generator. None for a
                       non-deterministic run.
        table:         Strategy table to grade with. Defaults to the built-in ranges.

    Returns:
        DrillResult for the run.
    """
    if n_hands <= 0:
        raise ValueError(f"n_hands must be positive, got {n_hands}")
    table = table if table is not None else default_strategy_table()
    rng = np.random.default_rng(seed)

    state = initial_state()
    correct = {p: 0 for p in ROTATION}
    total = {p: 0 for p in ROTATION}
    n_fallback = 0

    for _ in range(n_hands):
        state = deal_next_hand(state, rng)
        assert state.hand is not None
        action = player_policy(state.hand, state.position)
        state, verdict = submit_action(state, action, table)
        assert verdict is not None

        total[verdict.position] += 1
        correct[verdict.position] += int(verdict.is_correct)
        n_fallback += int(verdict.is_fallback)

    n_correct = state.stats.correct
    p = n_correct / n_hands
    ci_margin = 1.96 * math.sqrt(p * (1.0 - p) / n_hands)

    return DrillResult(
        n_hands=n_hands,
        n_correct=n_correct,
        hit_rate=p,
        ci_95_low=max(0.0, p - ci_margin),
        ci_95_high=min(1.0, p + ci_margin),
        by_position={pos: SessionStats(correct[pos], total[pos]) for pos in ROTATION},
        n_fallback=n_fallback,
    )


# ─── __main__ ─────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    strategy = default_strategy_table()
    print("Preflop drill simulation: 60,000 hands per policy\n")
    for name, policy in [
        ("table", make_table_policy(strategy)),
        ("always fold", make_fixed_policy(Action.FOLD)),
        ("always raise", make_fixed_policy(Action.RAISE)),
        ("random", make_random_policy(seed=7)),
    ]:
        print(f"{name:<13} {simulate_drill(policy, n_hands=60_000)}")
    print("\nAnalytic expectations:")
    for act in Action:
        print(f"  always {act.value:<6} → {expected_accuracy(strategy, act) * 100:.2f}%")
