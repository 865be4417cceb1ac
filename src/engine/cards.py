"""
Card constants, encoding, and human-readable I/O helpers.

Card encoding (integer 0–51):
    rank_index = card // 4  ->  0=2, 1=3, ..., 8=T, 9=J, 10=Q, 11=K, 12=A
    suit_index = card % 4   ->  0=C, 1=D, 2=H, 3=S

Higher rank_index means a stronger rank, so rank comparisons are plain
integer comparisons. String representations ('AS', 'Td', 'A♠') are used
exclusively at I/O boundaries.
"""

from __future__ import annotations

RANK_NAMES: list[str] = ['2', '3', '4', '5', '6', '7', '8', '9', 'T', 'J', 'Q', 'K', 'A']
SUIT_NAMES: list[str] = ['C', 'D', 'H', 'S']
SUIT_SYMBOLS: list[str] = ['♣', '♦', '♥', '♠']

# Strongest first; this is the row/column order of a hand-class chart.
RANKS_DESCENDING: str = 'AKQJT98765432'

RANK_ACE: int = 12
RANK_KING: int = 11
RANK_TWO: int = 0

NUM_RANKS: int = 13
NUM_SUITS: int = 4
NUM_CARDS: int = 52

# Hearts and diamonds render red.
RED_SUITS: frozenset[int] = frozenset({1, 2})

# '10' is accepted on input for convenience and normalised to 'T'.
_RANK_ALIASES: dict[str, str] = {'10': 'T'}


def card_rank(card: int) -> int:
    """Return the rank index (0–12) of a card.

    Examples:
        >>> card_rank(0)   # 2 of Clubs
        0
        >>> card_rank(51)  # Ace of Spades
        12
    """
    return card // 4


def card_suit(card: int) -> int:
    """Return the suit index (0–3) of a card.

    Examples:
        >>> card_suit(0)   # 2 of Clubs
        0
        >>> card_suit(51)  # Ace of Spades
        3
    """
    return card % 4


def make_card(rank: int, suit: int) -> int:
    """Build a card integer from rank and suit indices.

    Raises:
        ValueError: If either index is out of range.

    Examples:
        >>> make_card(12, 3)  # Ace of Spades
        51
    """
    if not 0 <= rank < NUM_RANKS:
        raise ValueError(f"Invalid rank index: {rank}")
    if not 0 <= suit < NUM_SUITS:
        raise ValueError(f"Invalid suit index: {suit}")
    return rank * 4 + suit


def is_valid_card(card: int) -> bool:
    """Return True if *card* is an integer in the range 0–51."""
    return isinstance(card, int) and 0 <= card < NUM_CARDS


def rank_symbol(card: int) -> str:
    """Return the one-character rank symbol of a card ('2'…'9', 'T', 'J', 'Q', 'K', 'A')."""
    return RANK_NAMES[card // 4]


def is_red(card: int) -> bool:
    """Return True for hearts and diamonds.

    Examples:
        >>> is_red(str_to_card('AH'))
        True
        >>> is_red(str_to_card('AS'))
        False
    """
    return card % 4 in RED_SUITS


def card_to_str(card: int) -> str:
    """Convert a card integer to its human-readable string representation.

    Examples:
        >>> card_to_str(0)   # 2 of Clubs
        '2C'
        >>> card_to_str(51)  # Ace of Spades
        'AS'
        >>> card_to_str(32)  # Ten of Clubs
        'TC'
    """
    return RANK_NAMES[card // 4] + SUIT_NAMES[card % 4]


def card_to_symbol(card: int) -> str:
    """Convert a card integer to a rank + suit-symbol string for display.

    Examples:
        >>> card_to_symbol(51)
        'A♠'
        >>> card_to_symbol(34)  # Ten of Hearts
        'T♥'
    """
    return RANK_NAMES[card // 4] + SUIT_SYMBOLS[card % 4]


def str_to_card(s: str) -> int:
    """Parse a human-readable card string to its integer encoding.

    The format is <rank><suit> where suit is the last character.
    Rank can be '2'-'9', 'T' (or '10'), 'J', 'Q', 'K', or 'A'.
    Suit can be 'C', 'D', 'H', or 'S', in either case, or a suit symbol.

    Raises:
        ValueError: If the string is not a valid card.

    Examples:
        >>> str_to_card('2C')
        0
        >>> str_to_card('AS')
        51
        >>> str_to_card('Td')
        33
        >>> str_to_card('10C')
        32
        >>> str_to_card('A♥')
        50
    """
    if len(s) < 2:
        raise ValueError(f"Invalid card string: {s!r}")
    suit_char = s[-1]
    rank_str = s[:-1].upper()
    rank_str = _RANK_ALIASES.get(rank_str, rank_str)
    if rank_str not in RANK_NAMES:
        raise ValueError(f"Invalid rank in card string: {s!r}")
    if suit_char in SUIT_SYMBOLS:
        suit = SUIT_SYMBOLS.index(suit_char)
    elif suit_char.upper() in SUIT_NAMES:
        suit = SUIT_NAMES.index(suit_char.upper())
    else:
        raise ValueError(f"Invalid suit in card string: {s!r}")
    return RANK_NAMES.index(rank_str) * 4 + suit


def hand_to_str(cards: tuple[int, ...]) -> str:
    """Convert a hand (tuple of card ints) to a human-readable string.

    Examples:
        >>> hand_to_str((48, 51))
        'AC AS'
    """
    return ' '.join(card_to_str(c) for c in cards)
