import pytest

from tropism_tree.palettes import PALETTES, WARM, color_for_level, select_palette


def test_eight_named_palettes():
    assert sorted(PALETTES) == list(range(8))
    assert all(len(p) > 0 for p in PALETTES.values())
    assert PALETTES[0] is WARM


@pytest.mark.parametrize("index", [1, 2, 3, 4, 5, 6, 7])
def test_select_named_palette(index):
    assert select_palette(index) is PALETTES[index]


@pytest.mark.parametrize("index", [0, 8, -1, 99])
def test_unknown_index_falls_back_to_default(index):
    assert select_palette(index) is WARM


def test_color_cycles_by_level():
    assert len(WARM) == 10
    assert color_for_level(WARM, 23) == WARM[3]
    assert color_for_level(WARM, 0) == WARM[0]
    assert color_for_level(WARM, 10) == WARM[0]


def test_color_index_always_in_range():
    for palette in PALETTES.values():
        for level in range(50):
            assert color_for_level(palette, level) in palette
