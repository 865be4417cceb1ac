"""
Deck creation, shuffling, and hole-card dealing.

The deck is a numpy int8 array holding the 52 card integers in a fixed
order (card // 4 = rank index, card % 4 = suit index). A fresh deck is built
and fully shuffled for every deal even though only the first two cards are
used, so the dealt pair is uniform over all 1326 unordered combos.

Randomness comes from a numpy Generator. Callers that need reproducible
deals pass their own; otherwise the module-level generator is used.
"""

from __future__ import annotations

import numpy as np

from .cards import NUM_CARDS, str_to_card

_RNG: np.random.Generator = np.random.default_rng()


def create_deck() -> np.ndarray:
    """Create a fresh, ordered 52-card deck.

    Returns:
        np.ndarray: int8 array of shape (52,) holding cards 0–51 in order.

    Examples:
        >>> deck = create_deck()
        >>> len(deck)
        52
        >>> deck.dtype
        dtype('int8')
    """
    return np.arange(NUM_CARDS, dtype=np.int8)


def shuffle_deck(deck: np.ndarray, rng: np.random.Generator | None = None) -> np.ndarray:
    """Return a uniformly random permutation of *deck* (Fisher–Yates).

    Walks i from the last index down to 1, draws j uniformly from [0, i]
    and swaps positions i and j. The input array is not modified.

    Args:
        deck: Array of cards to shuffle. Any length, including 0 and 1.
        rng:  Generator to draw from. Defaults to the module generator.

    Returns:
        A new array with the same elements in shuffled order.

    Examples:
        >>> shuffled = shuffle_deck(create_deck())
        >>> sorted(shuffled.tolist()) == list(range(52))
        True
    """
    rng = _RNG if rng is None else rng
    shuffled = np.array(deck, copy=True)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def deal_hole_cards(rng: np.random.Generator | None = None) -> tuple[int, int]:
    """Shuffle a fresh deck and return its first two cards.

    Examples:
        >>> c1, c2 = deal_hole_cards()
        >>> c1 != c2
        True
    """
    deck = shuffle_deck(create_deck(), rng)
    return int(deck[0]), int(deck[1])


def str_to_cards(*card_strs: str) -> tuple[int, ...]:
    """Parse several card strings at once.

    Convenience wrapper for test setup using human-readable card names.

    Examples:
        >>> str_to_cards('AS', 'KS')
        (51, 47)
    """
    return tuple(str_to_card(s) for s in card_strs)
