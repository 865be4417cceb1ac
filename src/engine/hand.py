"""
Hand canonicalization: two dealt cards -> hand-class label.

Hand-class grammar:
    Pair:     rank repeated                      "AA", "77"
    Non-pair: higher rank, lower rank, suffix    "AKs", "T9o"
              suffix "s" if both cards share a suit, "o" otherwise

The label never depends on which card was drawn first. There are 169
hand classes covering the 1326 unordered two-card combos:
    13 pairs   x 6 combos  =   78
    78 suited  x 4 combos  =  312
    78 offsuit x 12 combos =  936
"""

from __future__ import annotations

import operator
from dataclasses import dataclass

from .cards import RANK_NAMES, RANKS_DESCENDING, card_to_str, card_to_symbol, is_valid_card, str_to_card

SUITED: str = 's'
OFFSUIT: str = 'o'

COMBOS_PAIR: int = 6
COMBOS_SUITED: int = 4
COMBOS_OFFSUIT: int = 12
TOTAL_COMBOS: int = 1326


class InvalidHandError(ValueError):
    """Raised when two cards cannot form a starting hand (duplicate or out of range)."""


def hand_class(card1: int, card2: int) -> str:
    """Return the hand-class label for two distinct cards.

    Args:
        card1: First card integer (0–51).
        card2: Second card integer (0–51).

    Returns:
        A 2-character pair label or a 3-character suited/offsuit label.

    Raises:
        InvalidHandError: If the cards are identical or not valid card ints.

    Examples:
        >>> hand_class(str_to_card('AS'), str_to_card('AH'))
        'AA'
        >>> hand_class(str_to_card('KS'), str_to_card('AS'))
        'AKs'
        >>> hand_class(str_to_card('9D'), str_to_card('TC'))
        'T9o'
    """
    try:
        c1, c2 = operator.index(card1), operator.index(card2)
    except TypeError:
        raise InvalidHandError(f"Cards must be integers 0-51, got {card1!r} and {card2!r}") from None
    if not (is_valid_card(c1) and is_valid_card(c2)):
        raise InvalidHandError(f"Cards must be integers 0-51, got {card1!r} and {card2!r}")
    if c1 == c2:
        raise InvalidHandError(f"A hand needs two distinct cards, got {card_to_str(c1)} twice")

    r1, r2 = c1 // 4, c2 // 4
    if r1 == r2:
        return RANK_NAMES[r1] * 2

    high, low = (r1, r2) if r1 > r2 else (r2, r1)
    suffix = SUITED if c1 % 4 == c2 % 4 else OFFSUIT
    return RANK_NAMES[high] + RANK_NAMES[low] + suffix


def parse_hand_class(label: str) -> tuple[str, str, bool | None]:
    """Split a hand-class label into (high_rank, low_rank, suited).

    *suited* is None for pairs.

    Raises:
        ValueError: If the label is not a canonical hand class.

    Examples:
        >>> parse_hand_class('AKs')
        ('A', 'K', True)
        >>> parse_hand_class('77')
        ('7', '7', None)
    """
    if len(label) == 2 and label[0] == label[1] and label[0] in RANK_NAMES:
        return label[0], label[1], None
    if len(label) == 3:
        high, low, suffix = label
        if (
            high in RANK_NAMES
            and low in RANK_NAMES
            and RANK_NAMES.index(high) > RANK_NAMES.index(low)
            and suffix in (SUITED, OFFSUIT)
        ):
            return high, low, suffix == SUITED
    raise ValueError(f"Not a canonical hand class: {label!r}")


def is_valid_hand_class(label: str) -> bool:
    """Return True if *label* follows the canonical hand-class grammar."""
    try:
        parse_hand_class(label)
    except ValueError:
        return False
    return True


def is_pair(label: str) -> bool:
    return len(label) == 2


def is_suited(label: str) -> bool:
    return label.endswith(SUITED)


def combo_count(label: str) -> int:
    """Return the number of concrete two-card combos in a hand class.

    Examples:
        >>> combo_count('AA'), combo_count('AKs'), combo_count('AKo')
        (6, 4, 12)
    """
    _, _, suited = parse_hand_class(label)
    if suited is None:
        return COMBOS_PAIR
    return COMBOS_SUITED if suited else COMBOS_OFFSUIT


def hand_class_grid() -> list[list[str]]:
    """Return the 13×13 hand-class chart layout.

    Rows and columns run A, K, …, 2. The diagonal holds pairs, cells above
    the diagonal are suited and cells below are offsuit.

    Examples:
        >>> grid = hand_class_grid()
        >>> grid[0][0], grid[0][1], grid[1][0], grid[12][12]
        ('AA', 'AKs', 'AKo', '22')
    """
    grid: list[list[str]] = []
    for r, row_rank in enumerate(RANKS_DESCENDING):
        row: list[str] = []
        for c, col_rank in enumerate(RANKS_DESCENDING):
            if r == c:
                row.append(row_rank * 2)
            elif r < c:
                row.append(row_rank + col_rank + SUITED)
            else:
                row.append(col_rank + row_rank + OFFSUIT)
        grid.append(row)
    return grid


ALL_HAND_CLASSES: tuple[str, ...] = tuple(label for row in hand_class_grid() for label in row)


@dataclass(frozen=True)
class Hand:
    """Two dealt cards and their canonical hand class."""
    cards: tuple[int, int]
    hand_class: str

    @classmethod
    def from_cards(cls, card1: int, card2: int) -> Hand:
        label = hand_class(card1, card2)
        return cls(cards=(int(card1), int(card2)), hand_class=label)

    @classmethod
    def from_strs(cls, card1: str, card2: str) -> Hand:
        """Build a hand from card strings, e.g. ``Hand.from_strs('AS', 'KD')``."""
        return cls.from_cards(str_to_card(card1), str_to_card(card2))

    def symbols(self) -> str:
        return ' '.join(card_to_symbol(c) for c in self.cards)

    def __str__(self) -> str:
        return f"{card_to_str(self.cards[0])} {card_to_str(self.cards[1])} ({self.hand_class})"
