"""
Shared pytest fixtures for preflop trainer tests.

Provides convenience wrappers around str_to_card for building known hands
and a small, fully specified strategy table for session tests.
"""

from __future__ import annotations

import numpy as np
import pytest

from src.engine.cards import str_to_card
from src.engine.positions import ROTATION, Position
from src.strategy.ranges import default_strategy_table
from src.strategy.table import Action, StrategyEntry, StrategyTable
from src.trainer.session import TrainingSession


def hand(*card_strs: str) -> tuple[int, ...]:
    """Build a hand tuple from human-readable card strings.

    Examples:
        >>> hand('AS', 'AC')   # Ace of Spades, Ace of Clubs
        (51, 48)
    """
    return tuple(str_to_card(s) for s in card_strs)


def small_ranges() -> dict[Position, dict[str, StrategyEntry]]:
    """Every seat raises AA, calls 22, folds everything else."""
    return {
        position: {
            "AA": StrategyEntry(Action.RAISE, 100, "Premium pair"),
            "22": StrategyEntry(Action.CALL, 50, "Set mine"),
            "default": StrategyEntry(Action.FOLD, 90, "Too weak"),
        }
        for position in ROTATION
    }


@pytest.fixture
def small_table() -> StrategyTable:
    return StrategyTable(small_ranges())


@pytest.fixture
def table() -> StrategyTable:
    """The built-in default table."""
    return default_strategy_table()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def session(table: StrategyTable) -> TrainingSession:
    return TrainingSession(table=table, seed=99)
