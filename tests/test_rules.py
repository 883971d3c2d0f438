from heatmapPoster.rules import spread_action


def test_spread_keeps_value_without_nonzero_neighbor():
    assert spread_action(0, (0, 0, 0, 0)) == 0
    assert spread_action(7, (0, 0, 0, 0)) == 7


def test_spread_first_match_order():
    assert spread_action(0, (1, 2, 3, 4)) == 1
    assert spread_action(0, (0, 2, 3, 4)) == 2
    assert spread_action(0, (0, 0, 3, 4)) == 3
    assert spread_action(0, (0, 0, 0, 4)) == 4


def test_spread_overrides_nonzero_cell():
    assert spread_action(9, (0, 5, 0, 0)) == 5
