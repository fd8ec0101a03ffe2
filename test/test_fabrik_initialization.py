import numpy as np
import pytest

from planar_fabrik import FabrikInitialization, InvalidChainError, forward_kinematics, initialize_pose


def test_toward_target_spreads_joints_on_line():
    target = np.array([2.0, 0.0])
    positions = initialize_pose([1.0, 1.0, 1.0, 1.0], target, seed=7)

    expected = np.array([[0.5, 0.0], [1.0, 0.0], [1.5, 0.0], [2.0, 0.0]])
    assert positions.shape == (4, 2)
    assert np.all(np.abs(positions - expected) <= 1e-4)
    # end effector sits exactly on the target
    np.testing.assert_array_equal(positions[-1], target)


def test_toward_target_perturbs_inner_joints():
    positions = initialize_pose([1.0, 1.0, 1.0], (3.0, 0.0), seed=11)
    assert np.all(positions[:-1, 1] != 0.0)


def test_toward_target_without_noise_is_exact():
    positions = initialize_pose([1.0, 1.0], (1.0, 1.0), noise=0.0, seed=1)
    np.testing.assert_allclose(positions, [[0.5, 0.5], [1.0, 1.0]])


def test_single_segment_starts_on_target():
    positions = initialize_pose([2.0], (1.0, 1.0), seed=5)
    np.testing.assert_array_equal(positions, [[1.0, 1.0]])


def test_from_angles_follows_forward_kinematics():
    lengths = [1.0, 0.5, 0.75]
    angles = [0.2, 0.4, -0.6]
    positions = initialize_pose(lengths, (1.0, 0.0), angles=angles, seed=2)

    reference = forward_kinematics(lengths, angles)
    assert np.all(np.abs(positions - reference) <= 1e-4)
    # every joint is perturbed, the end effector included
    assert np.all(positions != reference)


def test_same_seed_reproduces_pose():
    a = initialize_pose([1.0, 1.0, 1.0], (1.0, 2.0), seed=42)
    b = initialize_pose([1.0, 1.0, 1.0], (1.0, 2.0), seed=42)
    c = initialize_pose([1.0, 1.0, 1.0], (1.0, 2.0), seed=43)
    np.testing.assert_array_equal(a, b)
    assert not np.array_equal(a, c)


def test_injected_generator_is_used(rng):
    expected_rng = np.random.default_rng(1234)
    positions = initialize_pose([1.0, 1.0], (2.0, 0.0), rng=rng)
    noise = expected_rng.uniform(-1e-4, 1e-4, size=(1, 2))
    np.testing.assert_allclose(positions[0], np.array([1.0, 0.0]) + noise[0])


def test_make_rng_derives_seed_from_clock():
    _, seed = FabrikInitialization.make_rng()
    assert isinstance(seed, int)
    _, seed = FabrikInitialization.make_rng(9)
    assert seed == 9


def test_angle_count_mismatch():
    with pytest.raises(InvalidChainError):
        initialize_pose([1.0, 1.0], (1.0, 0.0), angles=[0.1], seed=0)


def test_negative_noise_rejected():
    with pytest.raises(InvalidChainError):
        initialize_pose([1.0, 1.0], (1.0, 0.0), noise=-1.0, seed=0)


def test_bad_target_rejected():
    with pytest.raises(InvalidChainError):
        initialize_pose([1.0, 1.0], (1.0,), seed=0)
