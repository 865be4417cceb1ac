"""
Default six-max preflop ranges.

Static dataset: position -> hand class -> (action, frequency %, rationale).
Every position ends with a "default" row used for hands not listed. The
entries are data, not algorithm; swap in another table with
load_strategy_table() when a different range set is wanted.

Blind entries describe play facing an open raise (3-bet / call / fold),
the other seats describe first-in opens.
"""

from __future__ import annotations

import functools

from src.engine.positions import Position
from src.strategy.table import Action, StrategyEntry, StrategyTable

DEFAULT_RANGES: dict[str, dict[str, tuple[str, int, str]]] = {
    "BTN": {
        # Premium hands
        "AA": ("raise", 100, "Premium hand - always raise from button"),
        "KK": ("raise", 100, "Premium hand - always raise"),
        "QQ": ("raise", 100, "Premium hand - always raise"),
        "JJ": ("raise", 100, "Strong hand - always raise"),
        "TT": ("raise", 100, "Strong pocket pair - always raise"),
        "99": ("raise", 100, "Medium pocket pair - always raise from BTN"),
        "88": ("raise", 100, "Medium pocket pair - always raise from BTN"),
        "77": ("raise", 100, "Small pair - always raise from BTN"),
        "66": ("raise", 100, "Small pair - always raise from BTN"),
        "55": ("raise", 100, "Small pair - always raise from BTN"),
        "44": ("raise", 100, "Small pair - always raise from BTN"),
        "33": ("raise", 100, "Small pair - always raise from BTN"),
        "22": ("raise", 100, "Small pair - always raise from BTN"),

        # Broadway hands
        "AKs": ("raise", 100, "Premium suited hand - always raise"),
        "AKo": ("raise", 100, "Premium offsuit hand - always raise"),
        "AQs": ("raise", 100, "Strong suited hand - always raise"),
        "AQo": ("raise", 100, "Strong offsuit hand - always raise"),
        "AJs": ("raise", 100, "Good suited hand - always raise from BTN"),
        "AJo": ("raise", 100, "Good offsuit hand - raise from BTN"),
        "ATs": ("raise", 100, "Good suited hand - always raise from BTN"),
        "ATo": ("raise", 100, "Decent offsuit hand - raise from BTN"),
        "A9s": ("raise", 100, "Suited ace - raise from BTN"),
        "A9o": ("raise", 85, "Marginal offsuit ace - raise frequently from BTN"),
        "A8s": ("raise", 100, "Suited ace - raise from BTN"),
        "A8o": ("raise", 75, "Weak offsuit ace - raise sometimes from BTN"),
        "A7s": ("raise", 100, "Suited ace - raise from BTN"),
        "A7o": ("raise", 65, "Weak offsuit ace - raise sometimes from BTN"),
        "A6s": ("raise", 100, "Suited ace - raise from BTN"),
        "A5s": ("raise", 100, "Suited wheel ace - raise from BTN"),
        "A4s": ("raise", 100, "Suited wheel ace - raise from BTN"),
        "A3s": ("raise", 100, "Suited wheel ace - raise from BTN"),
        "A2s": ("raise", 100, "Suited wheel ace - raise from BTN"),

        "KQs": ("raise", 100, "Strong suited broadways - always raise"),
        "KQo": ("raise", 100, "Strong offsuit broadways - always raise"),
        "KJs": ("raise", 100, "Good suited broadways - always raise"),
        "KJo": ("raise", 100, "Good offsuit broadways - raise from BTN"),
        "KTs": ("raise", 100, "Good suited broadways - raise from BTN"),
        "KTo": ("raise", 100, "Decent offsuit broadways - raise from BTN"),
        "K9s": ("raise", 100, "Suited king - raise from BTN"),
        "K9o": ("raise", 75, "Offsuit king - raise sometimes from BTN"),

        "QJs": ("raise", 100, "Strong suited connectors - always raise"),
        "QJo": ("raise", 100, "Strong offsuit broadways - raise from BTN"),
        "QTs": ("raise", 100, "Good suited connectors - raise from BTN"),
        "QTo": ("raise", 100, "Decent offsuit broadways - raise from BTN"),
        "Q9s": ("raise", 100, "Suited queen - raise from BTN"),

        "JTs": ("raise", 100, "Strong suited connectors - always raise"),
        "JTo": ("raise", 100, "Decent offsuit broadways - raise from BTN"),
        "J9s": ("raise", 100, "Suited connectors - raise from BTN"),

        "T9s": ("raise", 100, "Suited connectors - raise from BTN"),
        "T8s": ("raise", 100, "Suited connectors - raise from BTN"),
        "98s": ("raise", 100, "Suited connectors - raise from BTN"),
        "87s": ("raise", 100, "Suited connectors - raise from BTN"),
        "76s": ("raise", 100, "Suited connectors - raise from BTN"),
        "65s": ("raise", 100, "Suited connectors - raise from BTN"),
        "54s": ("raise", 100, "Suited connectors - raise from BTN"),

        "default": ("fold", 60, "Weak hand - fold most of the time"),
    },

    "CO": {
        "AA": ("raise", 100, "Premium hand - always raise"),
        "KK": ("raise", 100, "Premium hand - always raise"),
        "QQ": ("raise", 100, "Premium hand - always raise"),
        "JJ": ("raise", 100, "Strong hand - always raise"),
        "TT": ("raise", 100, "Strong pocket pair - always raise"),
        "99": ("raise", 100, "Medium pocket pair - always raise"),
        "88": ("raise", 100, "Medium pocket pair - always raise"),
        "77": ("raise", 100, "Small pair - always raise from CO"),
        "66": ("raise", 100, "Small pair - always raise from CO"),
        "55": ("raise", 100, "Small pair - always raise from CO"),
        "44": ("raise", 90, "Small pair - raise frequently from CO"),
        "33": ("raise", 85, "Small pair - raise frequently from CO"),
        "22": ("raise", 80, "Small pair - raise frequently from CO"),

        "AKs": ("raise", 100, "Premium suited hand - always raise"),
        "AKo": ("raise", 100, "Premium offsuit hand - always raise"),
        "AQs": ("raise", 100, "Strong suited hand - always raise"),
        "AQo": ("raise", 100, "Strong offsuit hand - always raise"),
        "AJs": ("raise", 100, "Good suited hand - always raise"),
        "AJo": ("raise", 100, "Good offsuit hand - raise from CO"),
        "ATs": ("raise", 100, "Good suited hand - always raise"),
        "ATo": ("raise", 90, "Decent offsuit hand - raise frequently from CO"),
        "A9s": ("raise", 100, "Suited ace - raise from CO"),
        "A8s": ("raise", 90, "Suited ace - raise frequently from CO"),
        "A7s": ("raise", 85, "Suited ace - raise frequently from CO"),
        "A6s": ("raise", 80, "Suited ace - raise sometimes from CO"),
        "A5s": ("raise", 100, "Suited wheel ace - raise from CO"),
        "A4s": ("raise", 90, "Suited wheel ace - raise frequently from CO"),
        "A3s": ("raise", 85, "Suited wheel ace - raise frequently from CO"),
        "A2s": ("raise", 80, "Suited wheel ace - raise sometimes from CO"),

        "KQs": ("raise", 100, "Strong suited broadways - always raise"),
        "KQo": ("raise", 100, "Strong offsuit broadways - always raise"),
        "KJs": ("raise", 100, "Good suited broadways - always raise"),
        "KJo": ("raise", 90, "Good offsuit broadways - raise frequently"),
        "KTs": ("raise", 100, "Good suited broadways - raise from CO"),
        "KTo": ("raise", 80, "Decent offsuit broadways - raise sometimes"),
        "K9s": ("raise", 85, "Suited king - raise frequently from CO"),

        "QJs": ("raise", 100, "Strong suited connectors - always raise"),
        "QJo": ("raise", 85, "Strong offsuit broadways - raise frequently"),
        "QTs": ("raise", 100, "Good suited connectors - raise from CO"),
        "QTo": ("raise", 75, "Decent offsuit broadways - raise sometimes"),
        "Q9s": ("raise", 80, "Suited queen - raise sometimes from CO"),

        "JTs": ("raise", 100, "Strong suited connectors - always raise"),
        "JTo": ("raise", 70, "Decent offsuit broadways - raise sometimes"),
        "J9s": ("raise", 85, "Suited connectors - raise frequently"),

        "T9s": ("raise", 90, "Suited connectors - raise frequently"),
        "T8s": ("raise", 85, "Suited connectors - raise frequently"),
        "98s": ("raise", 80, "Suited connectors - raise sometimes"),
        "87s": ("raise", 75, "Suited connectors - raise sometimes"),
        "76s": ("raise", 70, "Suited connectors - raise sometimes"),

        "default": ("fold", 70, "Weak hand - fold frequently"),
    },

    "HJ": {
        "AA": ("raise", 100, "Premium hand - always raise"),
        "KK": ("raise", 100, "Premium hand - always raise"),
        "QQ": ("raise", 100, "Premium hand - always raise"),
        "JJ": ("raise", 100, "Strong hand - always raise"),
        "TT": ("raise", 100, "Strong pocket pair - always raise"),
        "99": ("raise", 100, "Medium pocket pair - always raise"),
        "88": ("raise", 100, "Medium pocket pair - always raise"),
        "77": ("raise", 95, "Small pair - raise frequently from HJ"),
        "66": ("raise", 90, "Small pair - raise frequently from HJ"),
        "55": ("raise", 85, "Small pair - raise frequently from HJ"),
        "44": ("raise", 75, "Small pair - raise sometimes from HJ"),
        "33": ("raise", 70, "Small pair - raise sometimes from HJ"),
        "22": ("raise", 65, "Small pair - raise sometimes from HJ"),

        "AKs": ("raise", 100, "Premium suited hand - always raise"),
        "AKo": ("raise", 100, "Premium offsuit hand - always raise"),
        "AQs": ("raise", 100, "Strong suited hand - always raise"),
        "AQo": ("raise", 100, "Strong offsuit hand - always raise"),
        "AJs": ("raise", 100, "Good suited hand - always raise"),
        "AJo": ("raise", 90, "Good offsuit hand - raise frequently"),
        "ATs": ("raise", 100, "Good suited hand - always raise"),
        "ATo": ("raise", 75, "Decent offsuit hand - raise sometimes"),
        "A9s": ("raise", 85, "Suited ace - raise frequently from HJ"),
        "A8s": ("raise", 75, "Suited ace - raise sometimes from HJ"),
        "A7s": ("raise", 70, "Suited ace - raise sometimes from HJ"),
        "A5s": ("raise", 85, "Suited wheel ace - raise frequently"),
        "A4s": ("raise", 80, "Suited wheel ace - raise sometimes"),
        "A3s": ("raise", 75, "Suited wheel ace - raise sometimes"),
        "A2s": ("raise", 70, "Suited wheel ace - raise sometimes"),

        "KQs": ("raise", 100, "Strong suited broadways - always raise"),
        "KQo": ("raise", 95, "Strong offsuit broadways - raise frequently"),
        "KJs": ("raise", 100, "Good suited broadways - always raise"),
        "KJo": ("raise", 80, "Good offsuit broadways - raise sometimes"),
        "KTs": ("raise", 90, "Good suited broadways - raise frequently"),
        "KTo": ("raise", 65, "Decent offsuit broadways - raise sometimes"),
        "K9s": ("raise", 75, "Suited king - raise sometimes from HJ"),

        "QJs": ("raise", 100, "Strong suited connectors - always raise"),
        "QJo": ("raise", 75, "Strong offsuit broadways - raise sometimes"),
        "QTs": ("raise", 90, "Good suited connectors - raise frequently"),
        "QTo": ("raise", 60, "Decent offsuit broadways - raise sometimes"),

        "JTs": ("raise", 100, "Strong suited connectors - always raise"),
        "JTo": ("fold", 60, "Marginal offsuit hand - fold from early position"),
        "J9s": ("raise", 75, "Suited connectors - raise sometimes"),

        "T9s": ("raise", 80, "Suited connectors - raise sometimes"),
        "T8s": ("raise", 70, "Suited connectors - raise sometimes"),
        "98s": ("raise", 65, "Suited connectors - raise sometimes"),
        "87s": ("raise", 60, "Suited connectors - raise sometimes"),

        "default": ("fold", 80, "Weak hand - fold from early position"),
    },

    "MP": {
        "AA": ("raise", 100, "Premium hand - always raise"),
        "KK": ("raise", 100, "Premium hand - always raise"),
        "QQ": ("raise", 100, "Premium hand - always raise"),
        "JJ": ("raise", 100, "Strong hand - always raise"),
        "TT": ("raise", 100, "Strong pocket pair - always raise"),
        "99": ("raise", 100, "Medium pocket pair - always raise"),
        "88": ("raise", 95, "Medium pocket pair - raise frequently"),
        "77": ("raise", 85, "Small pair - raise frequently from MP"),
        "66": ("raise", 75, "Small pair - raise sometimes from MP"),
        "55": ("raise", 70, "Small pair - raise sometimes from MP"),
        "44": ("fold", 60, "Small pair - too weak from early position"),
        "33": ("fold", 65, "Small pair - too weak from early position"),
        "22": ("fold", 70, "Small pair - too weak from early position"),

        "AKs": ("raise", 100, "Premium suited hand - always raise"),
        "AKo": ("raise", 100, "Premium offsuit hand - always raise"),
        "AQs": ("raise", 100, "Strong suited hand - always raise"),
        "AQo": ("raise", 100, "Strong offsuit hand - always raise"),
        "AJs": ("raise", 100, "Good suited hand - always raise"),
        "AJo": ("raise", 80, "Good offsuit hand - raise sometimes from MP"),
        "ATs": ("raise", 95, "Good suited hand - raise frequently"),
        "ATo": ("fold", 60, "Marginal offsuit hand - fold from early position"),
        "A9s": ("raise", 75, "Suited ace - raise sometimes from MP"),
        "A8s": ("fold", 60, "Weak suited ace - fold from early position"),
        "A5s": ("raise", 70, "Suited wheel ace - raise sometimes"),
        "A4s": ("raise", 65, "Suited wheel ace - raise sometimes"),
        "A3s": ("fold", 60, "Weak suited ace - fold from early position"),
        "A2s": ("fold", 65, "Weak suited ace - fold from early position"),

        "KQs": ("raise", 100, "Strong suited broadways - always raise"),
        "KQo": ("raise", 90, "Strong offsuit broadways - raise frequently"),
        "KJs": ("raise", 95, "Good suited broadways - raise frequently"),
        "KJo": ("raise", 70, "Good offsuit broadways - raise sometimes"),
        "KTs": ("raise", 80, "Good suited broadways - raise sometimes"),
        "KTo": ("fold", 65, "Marginal offsuit hand - fold from early position"),

        "QJs": ("raise", 95, "Strong suited connectors - raise frequently"),
        "QJo": ("fold", 60, "Marginal offsuit hand - fold from early position"),
        "QTs": ("raise", 80, "Good suited connectors - raise sometimes"),

        "JTs": ("raise", 90, "Strong suited connectors - raise frequently"),
        "JTo": ("fold", 70, "Weak offsuit hand - fold from early position"),

        "T9s": ("raise", 65, "Suited connectors - raise sometimes"),
        "98s": ("fold", 60, "Weak suited connectors - fold from early position"),

        "default": ("fold", 85, "Weak hand - fold from early position"),
    },

    "BB": {
        "AA": ("raise", 100, "Premium hand - always 3-bet"),
        "KK": ("raise", 100, "Premium hand - always 3-bet"),
        "QQ": ("raise", 95, "Strong hand - 3-bet frequently"),
        "JJ": ("call", 70, "Good hand - mix of call and 3-bet"),
        "TT": ("call", 80, "Decent hand - call frequently"),
        "99": ("call", 85, "Medium pair - call frequently"),
        "88": ("call", 80, "Medium pair - call frequently"),
        "77": ("call", 75, "Small pair - call frequently"),
        "66": ("call", 70, "Small pair - call sometimes"),
        "55": ("call", 65, "Small pair - call sometimes"),
        "44": ("call", 60, "Small pair - call sometimes"),
        "33": ("call", 55, "Small pair - call sometimes"),
        "22": ("call", 50, "Small pair - call sometimes"),

        "AKs": ("raise", 90, "Premium drawing hand - 3-bet frequently"),
        "AKo": ("raise", 85, "Premium drawing hand - 3-bet frequently"),
        "AQs": ("call", 75, "Good hand - call frequently"),
        "AQo": ("call", 65, "Good hand - call sometimes"),
        "AJs": ("call", 70, "Good suited hand - call frequently"),
        "AJo": ("call", 55, "Marginal hand - call sometimes"),
        "ATs": ("call", 65, "Good suited hand - call sometimes"),
        "ATo": ("call", 50, "Marginal hand - call sometimes"),
        "A9s": ("call", 60, "Suited ace - call sometimes"),
        "A8s": ("call", 55, "Suited ace - call sometimes"),
        "A7s": ("call", 50, "Suited ace - call sometimes"),
        "A6s": ("call", 45, "Suited ace - call sometimes"),
        "A5s": ("call", 60, "Suited wheel ace - call sometimes"),
        "A4s": ("call", 55, "Suited wheel ace - call sometimes"),
        "A3s": ("call", 50, "Suited wheel ace - call sometimes"),
        "A2s": ("call", 45, "Suited wheel ace - call sometimes"),

        "KQs": ("call", 70, "Strong suited broadways - call frequently"),
        "KQo": ("call", 60, "Strong offsuit broadways - call sometimes"),
        "KJs": ("call", 65, "Good suited broadways - call sometimes"),
        "KJo": ("call", 50, "Marginal offsuit hand - call sometimes"),
        "KTs": ("call", 60, "Good suited broadways - call sometimes"),
        "KTo": ("call", 45, "Marginal offsuit hand - call sometimes"),
        "K9s": ("call", 50, "Suited king - call sometimes"),

        "QJs": ("call", 65, "Strong suited connectors - call sometimes"),
        "QJo": ("call", 50, "Marginal offsuit hand - call sometimes"),
        "QTs": ("call", 60, "Good suited connectors - call sometimes"),
        "QTo": ("call", 45, "Marginal offsuit hand - call sometimes"),
        "Q9s": ("call", 50, "Suited queen - call sometimes"),

        "JTs": ("call", 65, "Strong suited connectors - call sometimes"),
        "JTo": ("call", 45, "Marginal offsuit hand - call sometimes"),
        "J9s": ("call", 55, "Suited connectors - call sometimes"),

        "T9s": ("call", 60, "Suited connectors - call sometimes"),
        "T8s": ("call", 55, "Suited connectors - call sometimes"),
        "98s": ("call", 50, "Suited connectors - call sometimes"),
        "87s": ("call", 45, "Suited connectors - call sometimes"),
        "76s": ("call", 40, "Suited connectors - call sometimes"),
        "65s": ("call", 35, "Suited connectors - call sometimes"),
        "54s": ("call", 30, "Suited connectors - call sometimes"),

        "default": ("fold", 70, "Weak hand - fold to raise"),
    },

    "SB": {
        "AA": ("raise", 100, "Premium hand - always 3-bet"),
        "KK": ("raise", 100, "Premium hand - always 3-bet"),
        "QQ": ("raise", 90, "Strong hand - 3-bet frequently"),
        "JJ": ("call", 65, "Good hand - mix strategies from worst position"),
        "TT": ("call", 70, "Decent hand - call from SB"),
        "99": ("call", 75, "Medium pair - call from SB"),
        "88": ("call", 70, "Medium pair - call from SB"),
        "77": ("call", 65, "Small pair - call sometimes from SB"),
        "66": ("call", 60, "Small pair - call sometimes from SB"),
        "55": ("call", 55, "Small pair - call sometimes from SB"),
        "44": ("fold", 55, "Small pair - often fold from worst position"),
        "33": ("fold", 60, "Small pair - often fold from worst position"),
        "22": ("fold", 65, "Small pair - often fold from worst position"),

        "AKs": ("raise", 85, "Premium drawing hand - 3-bet frequently"),
        "AKo": ("raise", 80, "Premium drawing hand - 3-bet frequently"),
        "AQs": ("call", 70, "Good hand - call frequently from SB"),
        "AQo": ("call", 60, "Good hand - call sometimes from SB"),
        "AJs": ("call", 65, "Good suited hand - call sometimes"),
        "AJo": ("fold", 55, "Marginal from worst position"),
        "ATs": ("call", 60, "Good suited hand - call sometimes"),
        "ATo": ("fold", 60, "Marginal from worst position"),
        "A9s": ("call", 55, "Suited ace - call sometimes from SB"),
        "A8s": ("fold", 55, "Weak suited ace - often fold from SB"),
        "A5s": ("call", 55, "Suited wheel ace - call sometimes"),
        "A4s": ("call", 50, "Suited wheel ace - call sometimes"),
        "A3s": ("fold", 60, "Weak suited ace - fold from SB"),
        "A2s": ("fold", 65, "Weak suited ace - fold from SB"),

        "KQs": ("call", 65, "Strong suited broadways - call sometimes"),
        "KQo": ("call", 55, "Strong offsuit broadways - call sometimes"),
        "KJs": ("call", 60, "Good suited broadways - call sometimes"),
        "KJo": ("fold", 60, "Marginal from worst position"),
        "KTs": ("call", 55, "Good suited broadways - call sometimes"),
        "KTo": ("fold", 65, "Marginal from worst position"),

        "QJs": ("call", 60, "Strong suited connectors - call sometimes"),
        "QJo": ("fold", 60, "Marginal from worst position"),
        "QTs": ("call", 55, "Good suited connectors - call sometimes"),

        "JTs": ("call", 60, "Strong suited connectors - call sometimes"),
        "JTo": ("fold", 65, "Weak offsuit hand - fold from SB"),
        "J9s": ("call", 50, "Suited connectors - call sometimes"),

        "T9s": ("call", 55, "Suited connectors - call sometimes"),
        "T8s": ("call", 50, "Suited connectors - call sometimes"),
        "98s": ("call", 45, "Suited connectors - call sometimes"),
        "87s": ("call", 40, "Suited connectors - call sometimes"),
        "76s": ("fold", 60, "Weak suited connectors - fold from SB"),

        "default": ("fold", 75, "Weak hand - fold from worst position"),
    },
}


def build_ranges(
    raw: dict[str, dict[str, tuple[str, int, str]]] = DEFAULT_RANGES,
) -> dict[Position, dict[str, StrategyEntry]]:
    """Convert compact (action, frequency, rationale) rows to StrategyEntry maps."""
    return {
        Position(position): {
            key: StrategyEntry(Action(action), frequency, rationale)
            for key, (action, frequency, rationale) in rows.items()
        }
        for position, rows in raw.items()
    }


@functools.cache
def default_strategy_table() -> StrategyTable:
    """Return the validated default table (built once per process)."""
    return StrategyTable(build_ranges())
