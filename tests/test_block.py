import pytest

from conftest import make_block, shape_of
from tetris3d_block import Block, Color, Element
from tetris3d_factory import TEMPLATES


def all_template_blocks():
    return [Block.from_template(t, Color.YELLOW, 1, 2, 3) for t in TEMPLATES.values()]


@pytest.mark.parametrize("axis", ["rotated_x", "rotated_y", "rotated_z"])
def test_four_rotations_restore_shape(axis):
    for block in all_template_blocks():
        turned = block
        for _ in range(4):
            turned = getattr(turned, axis)()
        assert turned == block


@pytest.mark.parametrize("axis", ["rotated_x", "rotated_y", "rotated_z"])
def test_rotation_keeps_anchor_and_count(axis):
    for block in all_template_blocks():
        turned = getattr(block, axis)()
        assert turned.anchor == block.anchor
        assert turned.size == block.size
        assert turned.occupied_count() == block.occupied_count()


def test_translation_moves_anchor_only():
    block = make_block(3, [(0, 1, 2), (1, 1, 2)], 2, 2, 10)
    moved = block.translated(-1, 1, -4)
    assert moved.anchor == (1, 3, 6)
    assert shape_of(moved) == shape_of(block)
    assert block.anchor == (2, 2, 10)


def test_rotation_permutations():
    n = 3
    block = make_block(n, [(0, 1, 2)])
    # new(i,j,k) = old(i, n-1-k, j) => old (0,1,2) lands at (0, 2, 1)
    assert shape_of(block.rotated_x()) == {(0, 2, 1)}
    # new(i,j,k) = old(k, j, n-1-i) => old (0,1,2) lands at (0, 1, 0)
    assert shape_of(block.rotated_y()) == {(0, 1, 0)}
    # new(i,j,k) = old(n-1-j, i, k) => old (0,1,2) lands at (1, 2, 2)
    assert shape_of(block.rotated_z()) == {(1, 2, 2)}


def test_rotation_is_not_trivial_for_asymmetric_shape():
    block = Block.from_template(TEMPLATES["fancy"], Color.RED)
    assert shape_of(block.rotated_x()) != shape_of(block)


def test_world_cells_offsets_by_anchor():
    block = make_block(2, [(0, 0, 0), (1, 1, 1)], 3, 4, 5, Color.BLUE)
    assert sorted((x, y, z) for x, y, z, _ in block.world_cells()) == [(3, 4, 5), (4, 5, 6)]
    assert all(e == Element(Color.BLUE) for *_, e in block.world_cells())


def test_element_at():
    block = make_block(2, [(1, 0, 1)])
    assert block.element_at(1, 0, 1) == Element(Color.RED)
    assert block.element_at(0, 0, 0) is None


def test_block_is_immutable():
    block = make_block(1, [(0, 0, 0)])
    with pytest.raises(AttributeError):
        block.x = 4


def test_non_cubical_cells_rejected():
    with pytest.raises(ValueError):
        Block([[[None, None]], [[None, None]]])
