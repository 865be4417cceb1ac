"""Text reports for the preflop strategy table and training sessions.

Public functions:

    summarize_range(table, position) — combo-weighted action shares for a seat
    print_range_summary(table)       — one row per seat: raise / call / fold %
    print_position_range(table, pos) — every explicit entry for one seat
    print_position_guide()           — seat names and descriptions
    print_session_report(session)    — running stats and per-seat breakdown

Percentages are weighted by combos (6 per pair, 4 per suited class, 12 per
offsuit class, 1326 in total), so they describe how often each action is
correct for a uniformly dealt hand.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.engine.hand import ALL_HAND_CLASSES, TOTAL_COMBOS, combo_count
from src.engine.positions import POSITION_INFO, ROTATION, Position
from src.strategy.table import DEFAULT_KEY, Action, StrategyTable
from src.trainer.session import TrainingSession


@dataclass(frozen=True)
class RangeSummary:
    """Combo-weighted breakdown of one seat's range.

    Attributes:
        position:        Seat summarised.
        combos:          Combos per recommended action (sums to 1326).
        n_explicit:      Hand classes with their own entry (default excluded).
        fallback_combos: Combos resolved through the default entry.
    """
    position: Position
    combos: dict[Action, int]
    n_explicit: int
    fallback_combos: int

    def share(self, action: Action) -> float:
        """Fraction of all combos for which *action* is correct."""
        return self.combos.get(action, 0) / TOTAL_COMBOS


def summarize_range(table: StrategyTable, position: Position) -> RangeSummary:
    combos = {action: 0 for action in Action}
    fallback_combos = 0
    for label in ALL_HAND_CLASSES:
        entry, is_fallback = table.resolve(position, label)
        n = combo_count(label)
        combos[entry.action] += n
        if is_fallback:
            fallback_combos += n
    n_explicit = sum(1 for key in table.entries(position) if key != DEFAULT_KEY)
    return RangeSummary(position, combos, n_explicit, fallback_combos)


# ─── Public report functions ──────────────────────────────────────────────────

def print_range_summary(table: StrategyTable) -> None:
    """Print combo-weighted raise / call / fold shares for every seat.

    Args:
        table: Strategy table to summarise.
    """
    print("=" * 56)
    print("Range Summary  (combo-weighted, 1326 combos)")
    print("=" * 56)
    print(f"  {'Seat':<4}  {'Raise':>6}  {'Call':>6}  {'Fold':>6}  {'Listed':>6}  {'Default':>7}")
    print(f"  {'----':<4}  {'------':>6}  {'------':>6}  {'------':>6}  {'------':>6}  {'-------':>7}")
    for position in ROTATION:
        s = summarize_range(table, position)
        print(
            f"  {position.value:<4}  {s.share(Action.RAISE)*100:>5.1f}%"
            f"  {s.share(Action.CALL)*100:>5.1f}%  {s.share(Action.FOLD)*100:>5.1f}%"
            f"  {s.n_explicit:>6}  {s.fallback_combos/TOTAL_COMBOS*100:>6.1f}%"
        )
    print()


def print_position_range(table: StrategyTable, position: Position) -> None:
    """Print every explicit entry for one seat, grouped by action.

    Args:
        table:    Strategy table to read.
        position: Seat to print.
    """
    info = POSITION_INFO[position]
    print("=" * 56)
    print(f"{info.full_name} ({info.name}): {info.description}")
    print("=" * 56)
    entries = table.entries(position)
    for action in (Action.RAISE, Action.CALL, Action.FOLD):
        rows = [
            (label, entry)
            for label, entry in entries.items()
            if label != DEFAULT_KEY and entry.action is action
        ]
        if not rows:
            continue
        print(f"  {action.value.upper()}")
        for label, entry in rows:
            print(f"    {label:<4} {entry.frequency:>3}%  {entry.rationale}")
    default = table.default_entry(position)
    print(f"  Everything else: {default.action.value} ({default.frequency}%)  {default.rationale}")
    print()


def print_position_guide() -> None:
    """Print the seat rotation with names and descriptions."""
    print("=" * 56)
    print("Position Guide")
    print("=" * 56)
    for position in ROTATION:
        info = POSITION_INFO[position]
        print(f"  {info.name:<4} {info.full_name:<16} {info.description}")
    print()


def print_session_report(session: TrainingSession) -> None:
    """Print overall accuracy and a per-seat breakdown for a session.

    Args:
        session: Session whose history is reported.
    """
    stats = session.get_stats()
    print("=" * 56)
    print("Session Report")
    print("=" * 56)
    print(f"  Hands answered:  {stats.total}")
    print(f"  Correct:         {stats.correct}")
    print(f"  Accuracy:        {stats.accuracy}%")
    print()
    print(f"  {'Seat':<4}  {'Correct':>7}  {'Total':>5}  {'Accuracy':>8}")
    print(f"  {'----':<4}  {'-------':>7}  {'-----':>5}  {'--------':>8}")
    for position, seat_stats in session.stats_by_position().items():
        acc = f"{seat_stats.accuracy}%" if seat_stats.total else "-"
        print(f"  {position.value:<4}  {seat_stats.correct:>7}  {seat_stats.total:>5}  {acc:>8}")
    misses = [v for v in session.history if not v.is_correct]
    if misses:
        print()
        print("  Missed hands:")
        for verdict in misses:
            print(f"    {verdict}")
    print()


# ─── Entry point ──────────────────────────────────────────────────────────────

if __name__ == "__main__":
    from src.strategy.ranges import default_strategy_table

    strategy = default_strategy_table()
    print_position_guide()
    print_range_summary(strategy)
    for seat in ROTATION:
        print_position_range(strategy, seat)
