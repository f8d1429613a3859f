"""
Selector Colour Palette

The colours a selector can claim, each with the text colour that reads on it.
"""

from typing import List, NamedTuple, Optional, Set


class ColorOption(NamedTuple):
    value: str
    contrast: str
    placeholder: str


COLOR_OPTIONS: List[ColorOption] = [
    ColorOption("#673AB7", "white", "Faustrolomeo"),
    ColorOption("#FF9800", "black", "Faustrólogo"),
    ColorOption("#00796B", "white", "Faustimberlake"),
    ColorOption("#E91E63", "white", "Faustinho"),
    ColorOption("#1976D2", "white", "Fausterry"),
    ColorOption("#FFD600", "black", "Faustimothée"),
    ColorOption("#64DD17", "black", "Faustroglodita"),
    ColorOption("#D32F2F", "white", "Faustopher"),
    ColorOption("#00ACC1", "white", "Faustonator"),
    ColorOption("#795548", "white", "Faustini"),
]


def find_color_option(color: str) -> Optional[ColorOption]:
    for option in COLOR_OPTIONS:
        if option.value.lower() == color.lower():
            return option
    return None


def next_free_color(taken: Set[str]) -> Optional[ColorOption]:
    """First palette colour whose (lower-cased) value is not in ``taken``"""
    for option in COLOR_OPTIONS:
        if option.value.lower() not in taken:
            return option
    return None
