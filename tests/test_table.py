"""Tests for src/strategy/table.py — entry validation, lookup fallback, JSON I/O."""

from __future__ import annotations

import json

import pytest

from src.engine.hand import ALL_HAND_CLASSES
from src.engine.positions import ROTATION, Position
from src.strategy.table import (
    DEFAULT_KEY,
    Action,
    MissingDefaultEntryError,
    StrategyEntry,
    StrategyTable,
    load_strategy_table,
    save_strategy_table,
)
from tests.conftest import small_ranges


# ─── Action / StrategyEntry ───────────────────────────────────────────────────

class TestAction:
    def test_values(self):
        assert [a.value for a in Action] == ['fold', 'call', 'raise']

    def test_parse_any_case(self):
        assert Action.parse('RAISE') is Action.RAISE
        assert Action.parse('Fold') is Action.FOLD
        assert Action.parse(Action.CALL) is Action.CALL

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match='Unknown action'):
            Action.parse('check')


class TestStrategyEntry:
    @pytest.mark.parametrize('freq', [0, 50, 100])
    def test_valid_frequency(self, freq):
        assert StrategyEntry(Action.FOLD, freq, '').frequency == freq

    @pytest.mark.parametrize('freq', [-1, 101])
    def test_frequency_out_of_range(self, freq):
        with pytest.raises(ValueError):
            StrategyEntry(Action.FOLD, freq, '')

    @pytest.mark.parametrize('freq', [50.5, 50.0, '50', None, True])
    def test_frequency_must_be_int(self, freq):
        with pytest.raises(ValueError, match='integer percent'):
            StrategyEntry(Action.RAISE, freq, 'x')  # type: ignore[arg-type]

    @pytest.mark.parametrize('freq', [50.7, True, '80'])
    def test_from_dict_does_not_coerce_frequency(self, freq):
        with pytest.raises(ValueError):
            StrategyEntry.from_dict({'action': 'raise', 'frequency': freq, 'rationale': 'x'})

    def test_from_dict_requires_mapping(self):
        with pytest.raises(ValueError, match='must be a mapping'):
            StrategyEntry.from_dict(['raise', 100, 'x'])  # type: ignore[arg-type]

    def test_action_must_be_enum(self):
        with pytest.raises(ValueError):
            StrategyEntry('raise', 100, '')  # type: ignore[arg-type]

    def test_from_dict(self):
        entry = StrategyEntry.from_dict({'action': 'Raise', 'frequency': 80, 'rationale': 'Strong'})
        assert entry == StrategyEntry(Action.RAISE, 80, 'Strong')

    def test_from_dict_reasoning_alias(self):
        entry = StrategyEntry.from_dict({'action': 'call', 'frequency': 40, 'reasoning': 'Speculative'})
        assert entry.rationale == 'Speculative'

    def test_to_dict(self):
        assert StrategyEntry(Action.CALL, 55, 'x').to_dict() == {
            'action': 'call', 'frequency': 55, 'rationale': 'x',
        }


# ─── Construction ─────────────────────────────────────────────────────────────

class TestConstruction:
    def test_missing_default_raises(self):
        ranges = small_ranges()
        del ranges[Position.HJ][DEFAULT_KEY]
        with pytest.raises(MissingDefaultEntryError) as exc_info:
            StrategyTable(ranges)
        assert exc_info.value.position is Position.HJ

    def test_missing_position_raises(self):
        ranges = small_ranges()
        del ranges[Position.SB]
        with pytest.raises(MissingDefaultEntryError):
            StrategyTable(ranges)

    def test_missing_default_is_value_error(self):
        ranges = small_ranges()
        del ranges[Position.BTN][DEFAULT_KEY]
        with pytest.raises(ValueError):
            StrategyTable(ranges)

    def test_invalid_hand_class_key(self):
        ranges = small_ranges()
        ranges[Position.CO]['KAs'] = StrategyEntry(Action.RAISE, 100, '')
        with pytest.raises(ValueError, match='invalid hand class'):
            StrategyTable(ranges)

    def test_non_entry_values_rejected(self):
        ranges = {p: {DEFAULT_KEY: ('fold', 60, 'x')} for p in ROTATION}
        with pytest.raises(ValueError, match='non-StrategyEntry'):
            StrategyTable(ranges)  # type: ignore[arg-type]

    def test_non_entry_hand_value_rejected(self):
        ranges = small_ranges()
        ranges[Position.MP]['AKs'] = {'action': 'raise', 'frequency': 100}  # type: ignore[assignment]
        with pytest.raises(ValueError, match="'AKs'"):
            StrategyTable(ranges)

    def test_non_mapping_sub_table_rejected(self):
        ranges = small_ranges()
        ranges[Position.CO] = 'default'  # type: ignore[assignment]
        with pytest.raises(ValueError, match='must be a mapping'):
            StrategyTable(ranges)

    def test_input_not_aliased(self):
        ranges = small_ranges()
        table = StrategyTable(ranges)
        ranges[Position.BTN]['KK'] = StrategyEntry(Action.RAISE, 100, '')
        assert not table.has_entry(Position.BTN, 'KK')

    def test_entries_read_only(self, small_table):
        with pytest.raises(TypeError):
            small_table.entries(Position.BTN)['KK'] = StrategyEntry(Action.RAISE, 100, '')  # type: ignore[index]

    def test_positions(self, small_table):
        assert small_table.positions == ROTATION

    def test_repr(self, small_table):
        assert repr(small_table) == 'StrategyTable(positions=6, entries=12)'


# ─── Lookup ───────────────────────────────────────────────────────────────────

class TestLookup:
    def test_exact_entry(self, small_table):
        entry = small_table.lookup(Position.BTN, 'AA')
        assert entry.action is Action.RAISE
        assert entry.frequency == 100

    def test_fallback_to_default(self, small_table):
        assert small_table.lookup(Position.MP, '72o') == small_table.default_entry(Position.MP)

    def test_resolve_reports_fallback(self, small_table):
        assert small_table.resolve(Position.BB, '22') == (
            StrategyEntry(Action.CALL, 50, 'Set mine'), False,
        )
        _, is_fallback = small_table.resolve(Position.BB, 'KQs')
        assert is_fallback

    @pytest.mark.parametrize('junk', ['', 'xyz', 'AKx', 'default', '🂡'])
    def test_total_on_arbitrary_strings(self, small_table, junk):
        for position in ROTATION:
            assert small_table.lookup(position, junk) == small_table.default_entry(position)

    def test_total_over_all_hand_classes(self, table):
        for position in ROTATION:
            for label in ALL_HAND_CLASSES:
                entry = table.lookup(position, label)
                assert isinstance(entry.action, Action)
                assert 0 <= entry.frequency <= 100

    def test_has_entry(self, small_table):
        assert small_table.has_entry(Position.CO, 'AA')
        assert not small_table.has_entry(Position.CO, 'AKo')
        assert not small_table.has_entry(Position.CO, DEFAULT_KEY)


# ─── Serialisation ────────────────────────────────────────────────────────────

class TestSerialisation:
    def test_dict_roundtrip(self, small_table):
        assert StrategyTable.from_dict(small_table.to_dict()) == small_table

    def test_json_roundtrip_preserves_lookups(self, table, tmp_path):
        path = tmp_path / 'ranges.json'
        save_strategy_table(table, path)
        loaded = load_strategy_table(path)
        assert loaded == table
        for position in ROTATION:
            for label in ALL_HAND_CLASSES:
                assert loaded.lookup(position, label) == table.lookup(position, label)

    def test_json_uses_position_names(self, small_table, tmp_path):
        path = tmp_path / 'ranges.json'
        save_strategy_table(small_table, path)
        raw = json.loads(path.read_text(encoding='utf-8'))
        assert sorted(raw) == sorted(p.value for p in ROTATION)
        assert raw['BTN']['AA'] == {'action': 'raise', 'frequency': 100, 'rationale': 'Premium pair'}

    def test_load_missing_default(self, tmp_path):
        raw = {p.value: {'default': {'action': 'fold', 'frequency': 50, 'rationale': ''}} for p in ROTATION}
        del raw['MP']['default']
        raw['MP']['AA'] = {'action': 'raise', 'frequency': 100, 'rationale': ''}
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps(raw), encoding='utf-8')
        with pytest.raises(MissingDefaultEntryError):
            load_strategy_table(path)

    def test_from_dict_missing_field(self):
        raw = {p.value: {'default': {'action': 'fold', 'frequency': 50}} for p in ROTATION}
        raw['BTN']['AA'] = {'action': 'raise'}
        with pytest.raises(ValueError, match='missing field'):
            StrategyTable.from_dict(raw)

    @pytest.mark.parametrize(
        'mutate, message',
        [
            (lambda raw: raw.update(BTN='fold everything'), 'BTN must be a mapping'),
            (lambda raw: raw['CO'].update(AA=['raise', 100, 'x']), 'CO/AA is invalid'),
            (lambda raw: raw['MP'].update(AA={'action': 'raise', 'frequency': None}), 'MP/AA is invalid'),
            (lambda raw: raw['BB'].update(AA={'action': 'check', 'frequency': 50}), 'BB/AA is invalid'),
            (lambda raw: raw['SB'].update(AA={'action': 'raise', 'frequency': 50.7}), 'SB/AA is invalid'),
        ],
    )
    def test_malformed_json_raises_value_error(self, tmp_path, mutate, message):
        raw = {p.value: {'default': {'action': 'fold', 'frequency': 50, 'rationale': ''}} for p in ROTATION}
        mutate(raw)
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps(raw), encoding='utf-8')
        with pytest.raises(ValueError, match=message):
            load_strategy_table(path)

    def test_from_dict_requires_mapping(self):
        with pytest.raises(ValueError, match='must be a mapping'):
            StrategyTable.from_dict([])  # type: ignore[arg-type]

    def test_from_dict_unknown_position(self):
        with pytest.raises(ValueError, match='Unknown position'):
            StrategyTable.from_dict({'UTG': {}})

    def test_not_equal_to_other_types(self, small_table):
        assert small_table != 'table'
