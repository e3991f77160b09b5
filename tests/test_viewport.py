import numpy as np
import pytest

from core.viewport import Viewport, map_x, map_y


VIEW = Viewport(x=10.0, y=50.0, width=600.0, height=400.0, lower=0.0, upper=3.3)


def test_latest_sample_maps_to_right_edge():
    assert map_x(5000, 5000, 1000, VIEW) == VIEW.width


def test_oldest_in_window_maps_to_left_edge():
    assert map_x(5000, 4000, 1000, VIEW) == pytest.approx(0.0)
    assert map_x(5000, 4500, 1000, VIEW) == pytest.approx(300.0)


def test_value_bounds_map_to_edges():
    assert map_y(VIEW.upper, VIEW) == pytest.approx(0.0)
    assert map_y(VIEW.lower, VIEW) == pytest.approx(VIEW.height)


def test_values_outside_range_are_not_clamped():
    assert map_y(6.6, VIEW) == pytest.approx(-VIEW.height)
    assert map_y(-3.3, VIEW) == pytest.approx(2 * VIEW.height)


def test_array_inputs():
    ts = np.array([4000, 4500, 5000], dtype=np.uint64)
    np.testing.assert_allclose(map_x(5000, ts, 1000, VIEW), [0.0, 300.0, 600.0])
    values = np.array([0.0, 1.65, 3.3], dtype=np.float32)
    np.testing.assert_allclose(map_y(values, VIEW), [400.0, 200.0, 0.0], atol=1e-3)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(width=0.0, height=10.0, lower=0.0, upper=1.0),
        dict(width=10.0, height=-1.0, lower=0.0, upper=1.0),
        dict(width=10.0, height=10.0, lower=1.0, upper=1.0),
    ],
)
def test_invalid_viewport(kwargs):
    with pytest.raises(ValueError):
        Viewport(x=0.0, y=0.0, **kwargs)


def test_invalid_duration():
    with pytest.raises(ValueError):
        map_x(1, 1, 0, VIEW)
