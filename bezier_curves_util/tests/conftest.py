#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

from bezier_curves_util.curves import CurveEvaluator, HandleMode


def make_curve(positions, left_offsets=None, right_offsets=None, parameters=None):
    """
    Build a curve with a key point at each position,
    offsets default to zero (straight segments between the key points),
    giving right offsets makes the handles broken
    """
    curve = CurveEvaluator(parameters)
    for index, position in enumerate(positions):
        key_point = curve.add_key_point()
        key_point.position = position
        if right_offsets is not None:
            key_point.handle_mode = HandleMode.BROKEN
            key_point.right_offset = right_offsets[index]
        key_point.left_offset = (
            np.zeros(3) if left_offsets is None else left_offsets[index]
        )
    return curve


def arc_curve(parameters=None):
    """
    A curve bending through a quarter circle and back out along z
    """
    return make_curve(
        positions=[
            [0.0, 0.0, 0.0],
            [1.0, 1.0, 0.0],
            [2.0, 0.0, 1.0],
        ],
        left_offsets=[
            [0.0, -0.5, 0.0],
            [-0.5, 0.0, 0.0],
            [0.0, 0.0, -0.5],
        ],
        parameters=parameters,
    )


def assert_vectors_equal(vector1, vector2, decimal=7):
    """
    Assert two 3D vectors are equal to the given number of decimals
    """
    assert np.asarray(vector1).shape == (3,)
    np.testing.assert_almost_equal(vector1, vector2, decimal=decimal)
