import random

import pytest

from tetris3d_block import Color
from tetris3d_factory import TEMPLATES, PieceFactory, TemplateError, validate_template


def test_catalog_is_cubical_with_expected_sizes():
    for name, template in TEMPLATES.items():
        validate_template(name, template)
    assert {len(t) for t in TEMPLATES.values()} == {1, 2, 3}
    assert len(TEMPLATES) == 8


def test_spawn_is_single_colored_and_matches_template():
    factory = PieceFactory(random.Random(7))
    for _ in range(50):
        block = factory.spawn_at(1, 1, 10)
        assert block.anchor == (1, 1, 10)
        colors = {e.color for *_, e in block.occupied()}
        assert len(colors) == 1
        cells = {(i, j, k) for i, j, k, _ in block.occupied()}
        assert any(
            cells == {(i, j, k)
                      for i, plane in enumerate(t)
                      for j, col in enumerate(plane)
                      for k, v in enumerate(col) if v}
            for t in TEMPLATES.values()
        )


def test_same_seed_same_sequence():
    a = PieceFactory(random.Random(42))
    b = PieceFactory(random.Random(42))
    assert [a.spawn_at(0, 0, 0) for _ in range(20)] == [b.spawn_at(0, 0, 0) for _ in range(20)]


def test_every_template_and_color_eventually_drawn():
    factory = PieceFactory(random.Random(3))
    blocks = [factory.spawn_at(0, 0, 0) for _ in range(500)]
    assert {next(b.occupied())[3].color for b in blocks} == set(Color)
    assert {b.size for b in blocks} == {1, 2, 3}


def test_restricted_catalog_and_colors():
    factory = PieceFactory(random.Random(0), templates={"cube": [[[1]]]}, colors=[Color.GREEN])
    block = factory.spawn_at(2, 3, 4)
    assert block.size == 1
    assert block.element_at(0, 0, 0).color is Color.GREEN


@pytest.mark.parametrize("template", [
    [[[1, 0]], [[0, 1]]],
    [[[1], [1]]],
    [],
    [[[0, 0], [0, 0]], [[0, 0], [0, 0]]],
])
def test_malformed_template_fails_at_construction(template):
    with pytest.raises(TemplateError):
        PieceFactory(random.Random(0), templates={"bad": template})
