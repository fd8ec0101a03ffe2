import numpy as np
import pytest

from planar_fabrik import (
    PlanarChain,
    EmptyChainError,
    InvalidChainError,
    UnreachableTargetError,
    calculate_joint_distances,
    is_reachable,
    check_reachable
)


def test_chain_properties():
    chain = PlanarChain([1.0, 2.0, 0.5])
    assert chain.num_segments == 3
    assert len(chain) == 3
    assert chain.total_length == 3.5
    assert chain.empty_positions().shape == (3, 2)


def test_lengths_are_read_only():
    chain = PlanarChain([1.0, 1.0])
    with pytest.raises(ValueError):
        chain.lengths[0] = 5.0


def test_empty_chain():
    with pytest.raises(EmptyChainError):
        PlanarChain([])


@pytest.mark.parametrize('lengths', [[1.0, 0.0], [-1.0], [1.0, float('inf')], ['a']])
def test_invalid_lengths(lengths):
    with pytest.raises(InvalidChainError):
        PlanarChain(lengths)


def test_joint_distances_start_at_base():
    positions = np.array([[3.0, 4.0], [3.0, 6.0]])
    np.testing.assert_allclose(calculate_joint_distances(positions), [5.0, 2.0])


def test_segment_errors():
    chain = PlanarChain([5.0, 1.0])
    positions = np.array([[3.0, 4.0], [3.0, 6.0]])
    np.testing.assert_allclose(chain.segment_errors(positions), [0.0, 1.0])
    assert chain.max_segment_error(positions) == 1.0


def test_segment_errors_shape_mismatch():
    chain = PlanarChain([1.0, 1.0])
    with pytest.raises(InvalidChainError):
        chain.segment_errors(np.zeros((3, 2)))


def test_reachability_boundary():
    # full extension is reachable
    assert is_reachable([1.0, 1.0], np.array([2.0, 0.0]))
    assert is_reachable([1.0, 0.5], np.array([0.0, -1.5]))
    assert is_reachable([1.0, 1.0], np.array([0.0, 0.0]))


def test_reachability_just_beyond():
    assert not is_reachable([1.0, 1.0], np.array([2.0 + 1e-9, 0.0]))
    assert not is_reachable([1.0], np.array([2.0, 0.0]))


@pytest.mark.parametrize('total, d, expected', [
    (2.0, 1.0, True),
    (2.0, 2.0, True),
    (2.0, 2.5, False),
    (3.0, 5.0, False),
])
def test_reachability_against_total_length(total, d, expected):
    lengths = [total / 2.0, total / 2.0]
    assert is_reachable(lengths, np.array([0.0, d])) == expected
    assert is_reachable(lengths, np.array([-d, 0.0])) == expected


def test_check_reachable_raises_with_details():
    with pytest.raises(UnreachableTargetError) as excinfo:
        check_reachable([1.0], np.array([2.0, 0.0]))
    assert excinfo.value.total_length == 1.0
    assert excinfo.value.distance == 2.0
