#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
import numpy as np

from bezier_curves_util.curves import ControlHandle, HandleMode
from bezier_curves_util.tests.conftest import assert_vectors_equal


def test_connected_left_offset_sets_right_offset():
    handle = ControlHandle()
    handle.left_offset = [-1.0, 0.0, 0.0]
    assert_vectors_equal(handle.right_offset, [1.0, 0.0, 0.0])
    handle.handle_mode = HandleMode.BROKEN
    handle.right_offset = [2.0, 2.0, 0.0]
    assert_vectors_equal(handle.left_offset, [-1.0, 0.0, 0.0])
    assert_vectors_equal(handle.right_offset, [2.0, 2.0, 0.0])


def test_connected_right_offset_sets_left_offset():
    handle = ControlHandle(handle_mode=HandleMode.CONNECTED)
    handle.right_offset = [0.0, 3.0, -1.0]
    assert_vectors_equal(handle.left_offset, [0.0, -3.0, 1.0])


def test_default_handle():
    handle = ControlHandle()
    assert handle.handle_mode == HandleMode.CONNECTED
    assert handle.curve is None
    assert_vectors_equal(handle.position, [0.0, 0.0, 0.0])
    assert_vectors_equal(handle.left_offset, [-0.5, 0.0, 0.0])
    assert_vectors_equal(handle.right_offset, [0.5, 0.0, 0.0])


@pytest.mark.parametrize(
    "left_offset, right_offset, handle_mode, expected_left, expected_right",
    [
        (
            [-1.0, 0.0, 0.0],
            None,
            HandleMode.CONNECTED,
            [-1.0, 0.0, 0.0],
            [1.0, 0.0, 0.0],
        ),
        (
            [-1.0, 0.0, 0.0],
            [0.0, 2.0, 0.0],
            HandleMode.CONNECTED,
            [0.0, -2.0, 0.0],
            [0.0, 2.0, 0.0],
        ),
        (
            [-1.0, 0.0, 0.0],
            [0.0, 2.0, 0.0],
            HandleMode.BROKEN,
            [-1.0, 0.0, 0.0],
            [0.0, 2.0, 0.0],
        ),
        (
            [-1.0, 0.0, 0.0],
            None,
            HandleMode.BROKEN,
            [-1.0, 0.0, 0.0],
            [0.5, 0.0, 0.0],
        ),
    ],
)
def test_constructor_offsets(
    left_offset, right_offset, handle_mode, expected_left, expected_right
):
    handle = ControlHandle(
        left_offset=left_offset, right_offset=right_offset, handle_mode=handle_mode
    )
    assert_vectors_equal(handle.left_offset, expected_left)
    assert_vectors_equal(handle.right_offset, expected_right)


def test_connecting_broken_handle_mirrors_left_offset():
    handle = ControlHandle(
        left_offset=[-1.0, 0.0, 0.0],
        right_offset=[0.0, 1.0, 0.0],
        handle_mode=HandleMode.BROKEN,
    )
    handle.handle_mode = HandleMode.CONNECTED
    assert_vectors_equal(handle.right_offset, [1.0, 0.0, 0.0])


def test_handle_positions():
    handle = ControlHandle(position=[1.0, 2.0, 3.0], left_offset=[-1.0, 0.0, 0.0])
    assert_vectors_equal(handle.left_handle_position, [0.0, 2.0, 3.0])
    assert_vectors_equal(handle.right_handle_position, [2.0, 2.0, 3.0])
    handle.right_handle_position = [1.0, 4.0, 3.0]
    assert_vectors_equal(handle.right_offset, [0.0, 2.0, 0.0])
    assert_vectors_equal(handle.left_handle_position, [1.0, 0.0, 3.0])


def test_returned_vectors_are_copies():
    handle = ControlHandle(left_offset=[-1.0, 0.0, 0.0])
    left_offset = handle.left_offset
    left_offset[0] = 5.0
    position = handle.position
    position[1] = 5.0
    assert_vectors_equal(handle.left_offset, [-1.0, 0.0, 0.0])
    assert_vectors_equal(handle.right_offset, [1.0, 0.0, 0.0])
    assert_vectors_equal(handle.position, [0.0, 0.0, 0.0])


def test_invalid_vector():
    with pytest.raises(ValueError):
        ControlHandle(position=[1.0, 2.0])
    handle = ControlHandle()
    with pytest.raises(ValueError):
        handle.left_offset = np.zeros(4)


def test_nan_position_is_rejected():
    handle = ControlHandle(position=[1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        handle.position = [np.nan, 0.0, 0.0]
    assert_vectors_equal(handle.position, [1.0, 2.0, 3.0])
