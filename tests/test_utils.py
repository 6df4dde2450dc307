from invaders.utils import clamp, rects_overlap, round_half_up


def test_overlapping_rectangles_collide():
    assert rects_overlap(0, 0, 10, 10, 5, 5, 10, 10)


def test_touching_edges_do_not_collide():
    # a.right == b.left
    assert not rects_overlap(0, 0, 10, 10, 10, 0, 10, 10)
    # a.bottom == b.top
    assert not rects_overlap(0, 0, 10, 10, 0, 10, 10, 10)


def test_overlap_is_symmetric():
    cases = [
        ((0, 0, 10, 10), (9, 9, 5, 5)),
        ((0, 0, 10, 10), (10, 0, 5, 5)),
        ((3, 3, 2, 2), (0, 0, 10, 10)),
        ((0, 0, 1, 1), (50, 50, 1, 1)),
    ]
    for a, b in cases:
        assert rects_overlap(*a, *b) == rects_overlap(*b, *a)


def test_contained_rectangle_collides():
    assert rects_overlap(0, 0, 100, 100, 40, 40, 2, 10)


def test_clamp():
    assert clamp(-1, 0, 5) == 0
    assert clamp(7, 0, 5) == 5
    assert clamp(3, 0, 5) == 3


def test_round_half_up():
    assert round_half_up(15.0) == 15
    assert round_half_up(22.5) == 23
    assert round_half_up(22.4) == 22
