from __future__ import annotations

import numpy as np
import pytest

from tint.render.contrast import invert


def test_invert_pure_red_is_black() -> None:
    # v=1 → 0 に回るため黒になる
    np.testing.assert_allclose(invert((1.0, 0.0, 0.0, 1.0)), (0.0, 0.0, 0.0, 1.0))


def test_invert_gray_rotates_value() -> None:
    np.testing.assert_allclose(invert((0.25, 0.25, 0.25, 1.0)), (0.75, 0.75, 0.75, 1.0))


def test_invert_rotates_hue_half_turn() -> None:
    # (0.6, 0.2, 0.2): h=0, s=2/3, v=0.6 → h=0.5, v=0.1
    r, g, b, a = invert((0.6, 0.2, 0.2, 1.0))
    assert r == pytest.approx(0.1 / 3.0)
    assert g == pytest.approx(0.1)
    assert b == pytest.approx(0.1)


def test_invert_ignores_input_alpha() -> None:
    # HSV は alpha を持たないので結果は常に不透明
    assert invert((0.2, 0.4, 0.6, 0.3))[3] == 1.0
    assert invert((0.2, 0.4, 0.6, 0.0))[3] == 1.0
    assert invert((0.2, 0.4, 0.6))[3] == 1.0


@pytest.mark.parametrize(
    "color",
    [(0.2, 0.4, 0.6, 1.0), (0.1, 0.05, 0.3, 0.5), (0.9, 0.7, 0.1, 1.0), (0.3, 0.3, 0.3, 1.0)],
)
def test_invert_twice_round_trips_rgb(color) -> None:
    np.testing.assert_allclose(invert(invert(color))[:3], color[:3], atol=1e-9)
