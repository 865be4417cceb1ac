"""Tests for src/engine/cards.py — card constants, encoding, and string I/O."""

from __future__ import annotations

import pytest

from src.engine.cards import (
    RANK_ACE,
    RANK_NAMES,
    RANKS_DESCENDING,
    SUIT_NAMES,
    card_rank,
    card_suit,
    card_to_str,
    card_to_symbol,
    hand_to_str,
    is_red,
    is_valid_card,
    make_card,
    rank_symbol,
    str_to_card,
)


class TestCardEncoding:
    def test_rank_range(self):
        for card in range(52):
            assert 0 <= card_rank(card) <= 12

    def test_suit_range(self):
        for card in range(52):
            assert 0 <= card_suit(card) <= 3

    def test_two_of_clubs_is_card_zero(self):
        assert card_rank(0) == 0  # rank 0 = '2'
        assert card_suit(0) == 0  # suit 0 = 'C'

    def test_ace_of_spades_is_card_51(self):
        assert card_rank(51) == RANK_ACE
        assert card_suit(51) == 3  # 'S'

    def test_unique_cards(self):
        """Each card integer encodes a unique rank+suit combination."""
        pairs = {(card_rank(c), card_suit(c)) for c in range(52)}
        assert len(pairs) == 52

    def test_four_cards_per_rank(self):
        for rank in range(13):
            rank_cards = [c for c in range(52) if card_rank(c) == rank]
            assert len(rank_cards) == 4

    def test_rank_index_orders_by_strength(self):
        """Higher rank index = stronger rank, matching A-high ordering."""
        assert list(reversed(RANK_NAMES)) == list(RANKS_DESCENDING)

    def test_make_card_inverse(self):
        for card in range(52):
            assert make_card(card_rank(card), card_suit(card)) == card

    def test_make_card_out_of_range(self):
        with pytest.raises(ValueError):
            make_card(13, 0)
        with pytest.raises(ValueError):
            make_card(0, 4)

    def test_is_valid_card(self):
        assert is_valid_card(0)
        assert is_valid_card(51)
        assert not is_valid_card(52)
        assert not is_valid_card(-1)


class TestStringIO:
    def test_card_to_str(self):
        assert card_to_str(0) == '2C'
        assert card_to_str(51) == 'AS'
        assert card_to_str(32) == 'TC'

    def test_str_to_card(self):
        assert str_to_card('2C') == 0
        assert str_to_card('AS') == 51
        assert str_to_card('TD') == 33

    def test_lowercase_suit(self):
        assert str_to_card('As') == str_to_card('AS')
        assert str_to_card('td') == str_to_card('TD')

    def test_ten_alias(self):
        assert str_to_card('10C') == str_to_card('TC')

    def test_suit_symbols(self):
        assert str_to_card('A♠') == 51
        assert str_to_card('K♥') == str_to_card('KH')

    def test_roundtrip_all_cards(self):
        for card in range(52):
            assert str_to_card(card_to_str(card)) == card

    @pytest.mark.parametrize('bad', ['', 'A', 'ZS', 'AX', '1C', 'AKS'])
    def test_invalid_strings_raise(self, bad):
        with pytest.raises(ValueError):
            str_to_card(bad)

    def test_card_to_symbol(self):
        assert card_to_symbol(str_to_card('AS')) == 'A♠'
        assert card_to_symbol(str_to_card('TH')) == 'T♥'
        assert card_to_symbol(str_to_card('2D')) == '2♦'
        assert card_to_symbol(str_to_card('9C')) == '9♣'

    def test_rank_symbol(self):
        assert rank_symbol(str_to_card('QH')) == 'Q'

    def test_hand_to_str(self):
        assert hand_to_str((48, 51)) == 'AC AS'

    def test_suit_names_cover_four_suits(self):
        assert sorted(SUIT_NAMES) == ['C', 'D', 'H', 'S']


class TestIsRed:
    def test_hearts_and_diamonds_red(self):
        assert is_red(str_to_card('AH'))
        assert is_red(str_to_card('AD'))

    def test_spades_and_clubs_black(self):
        assert not is_red(str_to_card('AS'))
        assert not is_red(str_to_card('AC'))
