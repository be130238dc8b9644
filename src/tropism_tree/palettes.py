"""Named color palettes used to tag branch segments by level."""

from __future__ import annotations

import logging
from typing import Dict, Sequence, Tuple

_LOGGER = logging.getLogger(__name__)

Palette = Tuple[str, ...]

WARM: Palette = (
    "SaddleBrown",
    "Sienna",
    "Chocolate",
    "Peru",
    "DarkGoldenrod",
    "Goldenrod",
    "Orange",
    "DarkOrange",
    "Coral",
    "Tomato",
)
FOREST: Palette = (
    "SaddleBrown",
    "DarkOliveGreen",
    "OliveDrab",
    "ForestGreen",
    "SeaGreen",
    "Green",
    "LimeGreen",
    "YellowGreen",
)
AUTUMN: Palette = (
    "Maroon",
    "Brown",
    "FireBrick",
    "Crimson",
    "OrangeRed",
    "DarkOrange",
    "Gold",
)
BLOSSOM: Palette = (
    "Sienna",
    "RosyBrown",
    "PaleVioletRed",
    "HotPink",
    "LightPink",
    "Pink",
    "MistyRose",
    "LavenderBlush",
)
OCEAN: Palette = (
    "MidnightBlue",
    "Navy",
    "DarkBlue",
    "RoyalBlue",
    "DodgerBlue",
    "DeepSkyBlue",
    "LightSkyBlue",
    "PaleTurquoise",
)
WINTER: Palette = (
    "DimGray",
    "Gray",
    "DarkGray",
    "Silver",
    "LightGray",
    "Gainsboro",
    "WhiteSmoke",
    "Snow",
)
TWILIGHT: Palette = (
    "Indigo",
    "DarkSlateBlue",
    "RebeccaPurple",
    "DarkOrchid",
    "MediumOrchid",
    "Orchid",
    "Plum",
    "Thistle",
)
DESERT: Palette = (
    "Sienna",
    "Tan",
    "BurlyWood",
    "Wheat",
    "SandyBrown",
    "NavajoWhite",
    "Khaki",
    "Moccasin",
    "Cornsilk",
)

# Index 0 (and anything unknown) is the warm default.
PALETTES: Dict[int, Palette] = {
    0: WARM,
    1: FOREST,
    2: AUTUMN,
    3: BLOSSOM,
    4: OCEAN,
    5: WINTER,
    6: TWILIGHT,
    7: DESERT,
}


def select_palette(index: int) -> Palette:
    """Return the palette for `index`, falling back to the warm default."""
    palette = PALETTES.get(index)
    if palette is None:
        _LOGGER.debug("Unknown palette index %r; using default", index)
        return WARM
    return palette


def color_for_level(palette: Sequence[str], level: int) -> str:
    """Return the color cycling through `palette` by recursion level."""
    return palette[level % len(palette)]
