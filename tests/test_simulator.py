"""Tests for the Monte Carlo drill simulator (src/analysis/simulator.py)."""

from __future__ import annotations

import pytest

from src.analysis.simulator import (
    DrillResult,
    expected_accuracy,
    make_fixed_policy,
    make_random_policy,
    make_table_policy,
    simulate_drill,
)
from src.engine.positions import ROTATION, Position
from src.strategy.table import Action


class TestSimulateDrill:
    def test_returns_result(self) -> None:
        result = simulate_drill(make_fixed_policy(Action.FOLD), n_hands=60)
        assert isinstance(result, DrillResult)
        assert result.n_hands == 60

    def test_table_policy_scores_perfectly(self, table) -> None:
        result = simulate_drill(make_table_policy(table), n_hands=600, table=table)
        assert result.n_correct == 600
        assert result.accuracy == 100
        assert result.hit_rate == 1.0

    def test_rotation_is_even(self) -> None:
        result = simulate_drill(make_fixed_policy(Action.RAISE), n_hands=600)
        assert all(result.by_position[p].total == 100 for p in ROTATION)

    def test_by_position_adds_up(self) -> None:
        result = simulate_drill(make_random_policy(seed=1), n_hands=300)
        assert sum(s.total for s in result.by_position.values()) == 300
        assert sum(s.correct for s in result.by_position.values()) == result.n_correct

    def test_ci_brackets_hit_rate(self) -> None:
        result = simulate_drill(make_random_policy(seed=3), n_hands=500)
        assert 0.0 <= result.ci_95_low <= result.hit_rate <= result.ci_95_high <= 1.0

    def test_seed_reproducible(self) -> None:
        a = simulate_drill(make_fixed_policy(Action.CALL), n_hands=200, seed=11)
        b = simulate_drill(make_fixed_policy(Action.CALL), n_hands=200, seed=11)
        assert a.n_correct == b.n_correct
        assert a.n_fallback == b.n_fallback

    def test_always_fold_matches_analytic(self, table) -> None:
        """Shuffled deals agree with the combo-weighted expectation."""
        n_hands = 6_000
        result = simulate_drill(make_fixed_policy(Action.FOLD), n_hands=n_hands, seed=2024, table=table)
        expected = expected_accuracy(table, Action.FOLD)
        # Binomial sd is below 0.0065 at n=6000; 0.03 is a ~4.6 sigma band.
        assert abs(result.hit_rate - expected) < 0.03

    def test_small_table_fallbacks(self, small_table) -> None:
        result = simulate_drill(make_fixed_policy(Action.FOLD), n_hands=300, table=small_table)
        # Only AA and 22 (12 of 1326 combos) have explicit entries.
        assert result.n_fallback > 270
        assert result.n_correct == result.n_fallback

    @pytest.mark.parametrize("n", [0, -5])
    def test_rejects_non_positive(self, n) -> None:
        with pytest.raises(ValueError):
            simulate_drill(make_fixed_policy(Action.FOLD), n_hands=n)

    def test_str(self) -> None:
        text = str(simulate_drill(make_fixed_policy(Action.FOLD), n_hands=12))
        assert text.startswith("Hands: 12 |")
        assert "95% CI" in text


class TestExpectedAccuracy:
    def test_actions_sum_to_one(self, table) -> None:
        total = sum(expected_accuracy(table, a) for a in Action)
        assert total == pytest.approx(1.0)

    def test_small_table(self, small_table) -> None:
        assert expected_accuracy(small_table, Action.RAISE) == pytest.approx(6 / 1326)
        assert expected_accuracy(small_table, Action.FOLD) == pytest.approx(1314 / 1326)

    def test_single_position(self, table) -> None:
        value = expected_accuracy(table, Action.RAISE, positions=(Position.BTN,))
        assert 0.0 < value < 1.0


class TestPolicies:
    def test_random_policy_covers_actions(self) -> None:
        policy = make_random_policy(seed=0)
        seen = {policy(None, Position.BTN) for _ in range(60)}  # type: ignore[arg-type]
        assert seen == set(Action)

    def test_table_policy_follows_lookup(self, table) -> None:
        from src.engine.hand import Hand

        policy = make_table_policy(table)
        h = Hand.from_strs("AS", "AH")
        assert policy(h, Position.BTN) is Action.RAISE
