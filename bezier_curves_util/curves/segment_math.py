#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np
from scipy import integrate

from ..common import VectorUtil


# local parameters this close to 0 or 1 evaluate to the exact end points
ENDPOINT_SNAP = 1e-2


class SegmentMath:
    """
    Formulas for a single cubic Bezier segment given its four control vectors:
    p0 = start position, p1 = start position + start right offset,
    p2 = end position + end left offset, p3 = end position
    """

    @staticmethod
    def get_control_points(start_handle, end_handle):
        """
        get the control vectors [p0, p1, p2, p3] of the segment
        between two consecutive key points
        """
        return [
            start_handle.position,
            start_handle.right_handle_position,
            end_handle.left_handle_position,
            end_handle.position,
        ]

    @staticmethod
    def position(t, p0, p1, p2, p3):
        """
        Bernstein blend of the control vectors at local parameter t
        """
        if abs(t) < ENDPOINT_SNAP:
            return np.array(p0, dtype=float)
        if abs(1.0 - t) < ENDPOINT_SNAP:
            return np.array(p3, dtype=float)
        u = 1.0 - t
        return (
            (u * u * u) * np.asarray(p0)
            + (3.0 * u * u * t) * np.asarray(p1)
            + (3.0 * u * t * t) * np.asarray(p2)
            + (t * t * t) * np.asarray(p3)
        )

    @staticmethod
    def positions(times, p0, p1, p2, p3, snap=True):
        """
        evaluate position() at each of an array of local parameters,
        returns an array of shape (len(times), 3)
        if snap is False only t = 0 and t = 1 return the exact end points
        """
        t = np.asarray(times, dtype=float)[:, np.newaxis]
        u = 1.0 - t
        result = (
            (u * u * u) * np.asarray(p0)
            + (3.0 * u * u * t) * np.asarray(p1)
            + (3.0 * u * t * t) * np.asarray(p2)
            + (t * t * t) * np.asarray(p3)
        )
        if snap:
            result[np.abs(t[:, 0]) < ENDPOINT_SNAP] = p0
            result[np.abs(1.0 - t[:, 0]) < ENDPOINT_SNAP] = p3
        else:
            result[t[:, 0] == 0.0] = p0
            result[t[:, 0] == 1.0] = p3
        return result

    @staticmethod
    def derivative(t, p0, p1, p2, p3):
        """
        derivative of the position with respect to t, not normalized
        """
        u = 1.0 - t
        return 3.0 * (
            (u * u) * (np.asarray(p1) - np.asarray(p0))
            + (2.0 * u * t) * (np.asarray(p2) - np.asarray(p1))
            + (t * t) * (np.asarray(p3) - np.asarray(p2))
        )

    @staticmethod
    def tangent(t, p0, p1, p2, p3):
        """
        unit direction of the segment at t,
        zero vector where the derivative vanishes
        """
        return VectorUtil.normalize(SegmentMath.derivative(t, p0, p1, p2, p3))

    @staticmethod
    def binormal(t, up, p0, p1, p2, p3):
        """
        normalize(up x tangent), zero vector if up is parallel to the tangent
        """
        tangent = SegmentMath.tangent(t, p0, p1, p2, p3)
        return VectorUtil.normalize(np.cross(VectorUtil.to_vector(up), tangent))

    @staticmethod
    def normal(t, up, p0, p1, p2, p3):
        """
        normalize(tangent x binormal)
        """
        tangent = SegmentMath.tangent(t, p0, p1, p2, p3)
        binormal = SegmentMath.binormal(t, up, p0, p1, p2, p3)
        return VectorUtil.normalize(np.cross(tangent, binormal))

    @staticmethod
    def rotation(t, up, p0, p1, p2, p3):
        """
        quaternion (x, y, z, w) looking along the tangent with the normal as up
        """
        tangent = SegmentMath.tangent(t, p0, p1, p2, p3)
        normal = SegmentMath.normal(t, up, p0, p1, p2, p3)
        return VectorUtil.get_look_rotation(tangent, normal)

    @staticmethod
    def approximate_length(p0, p1, p2, p3, sampling):
        """
        length of the polyline through the positions at
        t = 0, 1/sampling, 2/sampling, ..., 1
        """
        if sampling < 1:
            raise ValueError(f"sampling must be at least 1, got {sampling}")
        times = np.arange(int(sampling) + 1) / float(sampling)
        points = SegmentMath.positions(times, p0, p1, p2, p3, snap=False)
        return float(np.sum(np.linalg.norm(np.diff(points, axis=0), axis=1)))

    @staticmethod
    def integrated_length(p0, p1, p2, p3):
        """
        arc length from numerically integrating the derivative magnitude,
        used as a reference for approximate_length()
        """
        result, _ = integrate.quad(
            lambda t: np.linalg.norm(SegmentMath.derivative(t, p0, p1, p2, p3)),
            0.0,
            1.0,
        )
        return result
