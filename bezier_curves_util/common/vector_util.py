#!/usr/bin/env python
# -*- coding: utf-8 -*-

import math
import logging
import numpy as np
from scipy.spatial.transform import Rotation


logger = logging.getLogger(__name__)

# vectors shorter than this are treated as having no direction
DEGENERATE_MAGNITUDE = 1e-5


class VectorUtil:
    """
    Vector helpers shared by the curve classes
    """

    @staticmethod
    def to_vector(v):
        """
        copy any 3-sequence into a float numpy array of shape 3
        """
        result = np.array(v, dtype=float)
        if result.shape != (3,):
            raise ValueError(f"Expected a 3D vector, got shape {result.shape}")
        if VectorUtil.vector_is_invalid(result):
            raise ValueError(f"Vector has NaN components: {result}")
        return result

    @staticmethod
    def zero():
        return np.zeros(3)

    @staticmethod
    def normalize(v):
        """
        normalize a vector,
        returns the zero vector if v is too short to have a direction
        """
        magnitude = np.linalg.norm(v)
        if magnitude < DEGENERATE_MAGNITUDE:
            return np.zeros(3)
        return v / magnitude

    @staticmethod
    def is_degenerate(v):
        """
        check if a direction vector is (close to) zero length
        """
        return np.linalg.norm(v) < DEGENERATE_MAGNITUDE

    @staticmethod
    def vector_is_invalid(v):
        """
        check if any of a 3D vector's components are NaN
        """
        return math.isnan(v[0]) or math.isnan(v[1]) or math.isnan(v[2])

    @staticmethod
    def get_rotation_matrix(v1, v2):
        """
        Cross the vectors and get a rotation matrix
        with columns [v2 x v1, v2, v1]
        """
        v3 = np.cross(v2, v1)
        return np.array(
            [[v3[0], v2[0], v1[0]], [v3[1], v2[1], v1[1]], [v3[2], v2[2], v1[2]]]
        )

    @staticmethod
    def get_look_rotation(forward, up):
        """
        get a quaternion (x, y, z, w) that rotates the z axis onto forward
        and the y axis onto up, up is orthonormalized against forward first,
        returns the identity if forward has no direction
        """
        forward = VectorUtil.normalize(forward)
        if VectorUtil.is_degenerate(forward):
            logger.debug("Look rotation with a zero forward vector, using identity")
            return np.array([0.0, 0.0, 0.0, 1.0])
        up = up - np.dot(up, forward) * forward
        up = VectorUtil.normalize(up)
        if VectorUtil.is_degenerate(up):
            up = VectorUtil.get_perpendicular_vector(forward)
        orientation = VectorUtil.get_rotation_matrix(forward, up)
        return Rotation.from_matrix(orientation).as_quat()

    @staticmethod
    def get_perpendicular_vector(v):
        """
        get a unit vector perpendicular to v
        """
        if v[0] == 0 and v[1] == 0:
            if v[2] == 0:
                raise ValueError("zero vector")
            return np.array([0.0, 1.0, 0.0])
        return VectorUtil.normalize(np.array([-v[1], v[0], 0.0]))
