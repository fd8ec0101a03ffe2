import math

import numpy as np
import pytest

from planar_fabrik import derive_angles, forward_kinematics, angle_deltas, wrap_angle, initialize_pose


def test_wrap_angle():
    assert wrap_angle(0.5) == 0.5
    assert wrap_angle(-math.pi) == pytest.approx(math.pi)
    assert wrap_angle(math.pi) == pytest.approx(math.pi)
    assert wrap_angle(3 * math.pi) == pytest.approx(math.pi)
    assert wrap_angle(2 * math.pi + 0.25) == pytest.approx(0.25)
    assert wrap_angle(-2 * math.pi - 0.25) == pytest.approx(-0.25)


def test_forward_kinematics_straight_and_bent():
    np.testing.assert_allclose(forward_kinematics([1.0, 1.0], [0.0, 0.0]), [[1.0, 0.0], [2.0, 0.0]])
    np.testing.assert_allclose(
        forward_kinematics([1.0, 1.0], [math.pi / 2, -math.pi / 2]),
        [[0.0, 1.0], [1.0, 1.0]],
        atol=1e-12
    )


def test_derive_angles_first_is_absolute():
    positions = np.array([[0.0, 2.0], [1.0, 2.0], [1.0, 1.0]])
    np.testing.assert_allclose(derive_angles(positions), [math.pi / 2, -math.pi / 2, -math.pi / 2])


@pytest.mark.parametrize('lengths, angles', [
    ([1.0, 1.0], [0.4, -0.9]),
    ([1.0, 0.5, 2.0, 0.7], [0.3, -1.2, 2.5, 0.0]),
    ([0.2, 0.2, 0.2], [-3.0, 3.0, 3.0]),
])
def test_angle_round_trip(lengths, angles):
    positions = forward_kinematics(lengths, angles)
    np.testing.assert_allclose(derive_angles(positions), angles, atol=1e-9)


def test_angle_round_trip_through_initializer_without_noise():
    lengths = [1.5, 1.0, 0.5]
    angles = [1.0, -0.5, 0.25]
    positions = initialize_pose(lengths, (0.0, 0.0), angles=angles, seed=3, noise=0.0)
    np.testing.assert_allclose(derive_angles(positions), angles, atol=1e-9)


def test_angle_deltas_are_wrapped():
    np.testing.assert_allclose(angle_deltas([0.5, 1.0], [0.25, -1.0]), [0.25, 2.0])
    np.testing.assert_allclose(angle_deltas([3.0], [-3.0]), [6.0 - 2 * math.pi])
