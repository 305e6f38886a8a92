from catstack.rendering.cat_parts import BODY, HEAD, SINGLE, TAIL, cat_part, has_face
from tests.helpers import parse_grid


def test_stacked_same_color_cats_form_one_long_cat():
    grid = parse_grid([
        ".A",
        "AA",
        "AA",
        "BA",
    ])
    assert cat_part(grid, 1, 0) == HEAD
    assert cat_part(grid, 2, 0) == TAIL
    assert cat_part(grid, 3, 0) == SINGLE
    assert cat_part(grid, 0, 1) == HEAD
    assert [cat_part(grid, r, 1) for r in (1, 2)] == [BODY, BODY]
    assert cat_part(grid, 3, 1) == TAIL


def test_empty_cell_has_no_part():
    grid = parse_grid([".", "A"])
    assert cat_part(grid, 0, 0) is None
    assert cat_part(grid, 1, 0) == SINGLE


def test_faces_only_on_heads_and_singles():
    assert has_face(HEAD)
    assert has_face(SINGLE)
    assert not has_face(BODY)
    assert not has_face(TAIL)
    assert not has_face(None)
