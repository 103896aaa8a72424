#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import numpy as np

from ..common import VectorUtil, CurvePointData
from .control_handle import ControlHandle
from .segment_math import SegmentMath
from .curve_errors import (
    CurveError,
    InvalidIndexError,
    MinimumPointsViolationError,
)


logger = logging.getLogger(__name__)

MIN_KEY_POINTS = 2
# normalized times this close to 0 or 1 return the first or last key point
BOUNDARY_SNAP = 0.01
# curves shorter than this are treated as zero length
MIN_CURVE_LENGTH = 1e-9
SAMPLING_MODES = ["segment", "curve"]
DEFAULT_PARAMETERS = {
    "sampling": 25,
    "sampling_mode": "segment",
    "up": (0.0, 1.0, 0.0),
    "verbose": False,
}


class CurveEvaluator:
    def __init__(
        self,
        parameters=None,
        on_point_created=None,
        on_point_destroyed=None,
    ):
        """
        Creates an empty chain of cubic Bezier segments,
        add at least 2 key points before evaluating it

        Params = Dict[str, Any] (or a pandas Series), missing keys use defaults
        keys:
        sampling, sampling_mode, up, verbose

        on_point_created(handle, index) and on_point_destroyed(handle, index)
        are called after a key point is inserted or removed
        so the host can create or destroy the object backing it
        """
        self.parameters = CurveEvaluator.get_parameters(parameters)
        self.on_point_created = on_point_created
        self.on_point_destroyed = on_point_destroyed
        self._key_points = []

    @staticmethod
    def get_parameters(parameters=None):
        """
        merge the given parameters over the defaults and validate them
        """
        result = dict(DEFAULT_PARAMETERS)
        if parameters is not None:
            for key in dict(parameters):
                if key not in DEFAULT_PARAMETERS:
                    raise ValueError(f"Unknown curve parameter: {key}")
                result[key] = parameters[key]
        result["sampling"] = CurveEvaluator._check_sampling(result["sampling"])
        if result["sampling_mode"] not in SAMPLING_MODES:
            raise ValueError(
                f"sampling_mode must be one of {SAMPLING_MODES}, "
                f"got {result['sampling_mode']}"
            )
        result["up"] = VectorUtil.to_vector(result["up"])
        result["verbose"] = bool(result["verbose"])
        return result

    @staticmethod
    def _check_sampling(sampling):
        if int(sampling) != sampling or int(sampling) < 1:
            raise ValueError(f"sampling must be a positive integer, got {sampling}")
        return int(sampling)

    @property
    def sampling(self):
        return self.parameters["sampling"]

    @sampling.setter
    def sampling(self, value):
        self.parameters["sampling"] = CurveEvaluator._check_sampling(value)

    @property
    def key_points(self):
        """
        a copy of the ordered list of key points
        """
        return list(self._key_points)

    @property
    def point_count(self):
        return len(self._key_points)

    @property
    def segment_count(self):
        return max(0, len(self._key_points) - 1)

    def _log(self, message, *args):
        logger.log(
            logging.INFO if self.parameters["verbose"] else logging.DEBUG,
            message,
            *args,
        )

    def _check_index(self, index, max_index):
        if (
            isinstance(index, bool)
            or not isinstance(index, (int, np.integer))
            or index < 0
            or index > max_index
        ):
            raise InvalidIndexError(index, (0, max_index))

    def _check_can_evaluate(self):
        if len(self._key_points) < MIN_KEY_POINTS:
            raise MinimumPointsViolationError(
                len(self._key_points),
                f"Can't evaluate a curve with {len(self._key_points)} key points, "
                f"at least {MIN_KEY_POINTS} are required",
            )

    def get_key_point(self, index):
        """
        get the key point at index
        """
        self._check_index(index, len(self._key_points) - 1)
        return self._key_points[index]

    def get_default_position(self, index):
        """
        get the position for a new key point inserted at index:
        the origin for the first two points,
        one unit beyond the first or last point when extending the curve,
        otherwise the middle of the segment being split
        """
        count = len(self._key_points)
        if count < MIN_KEY_POINTS:
            return VectorUtil.zero()
        if index == 0:
            first = self._key_points[0].position
            return VectorUtil.normalize(first - self._key_points[1].position) + first
        if index == count:
            last = self._key_points[count - 1].position
            return (
                VectorUtil.normalize(last - self._key_points[count - 2].position)
                + last
            )
        return SegmentMath.position(
            0.5,
            *SegmentMath.get_control_points(
                self._key_points[index - 1], self._key_points[index]
            ),
        )

    def insert_at(self, index):
        """
        create a new key point and insert it at index in [0, point_count]
        """
        self._check_index(index, len(self._key_points))
        handle = ControlHandle(position=self.get_default_position(index))
        handle.curve = self
        self._key_points.insert(index, handle)
        self._log("Inserted key point %d at %s", index, handle.position)
        if self.on_point_created is not None:
            self.on_point_created(handle, index)
        return handle

    def add_key_point(self):
        """
        create a new key point at the end of the curve
        """
        return self.insert_at(len(self._key_points))

    def remove_at(self, index):
        """
        remove and return the key point at index,
        the curve is unchanged if this fails
        """
        self._check_index(index, len(self._key_points) - 1)
        if len(self._key_points) <= MIN_KEY_POINTS:
            raise MinimumPointsViolationError(
                len(self._key_points),
                f"Can't remove a key point from a curve with "
                f"{len(self._key_points)} key points",
            )
        handle = self._key_points.pop(index)
        handle.curve = None
        self._log("Removed key point %d at %s", index, handle.position)
        if self.on_point_destroyed is not None:
            self.on_point_destroyed(handle, index)
        return handle

    def index_of(self, handle):
        """
        get the index of a key point owned by this curve
        """
        for index, key_point in enumerate(self._key_points):
            if key_point is handle:
                return index
        raise CurveError(f"{handle.to_string()} doesn't belong to this curve")

    def remove_key_point(self, handle):
        """
        remove a key point owned by this curve
        """
        return self.remove_at(self.index_of(handle))

    def move_key_point(self, old_index, new_index):
        """
        move a key point to a new index, shifting the ones in between
        """
        max_index = len(self._key_points) - 1
        self._check_index(old_index, max_index)
        self._check_index(new_index, max_index)
        handle = self._key_points.pop(old_index)
        self._key_points.insert(new_index, handle)
        self._log("Moved key point %d to %d", old_index, new_index)
        return handle

    def get_segment_sampling(self):
        """
        get the number of subdivisions used per segment
        """
        if self.parameters["sampling_mode"] == "curve":
            return self.sampling // max(1, self.segment_count) + 1
        return self.sampling

    def get_segment_lengths(self):
        """
        get the approximate length of each segment
        """
        sampling = self.get_segment_sampling()
        return [
            SegmentMath.approximate_length(
                *SegmentMath.get_control_points(
                    self._key_points[i], self._key_points[i + 1]
                ),
                sampling,
            )
            for i in range(len(self._key_points) - 1)
        ]

    def approximate_length(self):
        """
        sum of the approximate lengths of all segments
        """
        self._check_can_evaluate()
        return float(sum(self.get_segment_lengths()))

    def resolve_segment(self, time):
        """
        find the segment containing normalized time in [0, 1]
        weighting each segment by its share of the total length,
        returns (start key point, end key point, time relative to the segment)
        """
        self._check_can_evaluate()
        segment_lengths = self.get_segment_lengths()
        total_length = sum(segment_lengths)
        if total_length > MIN_CURVE_LENGTH:
            total_percent = 0.0
            for i, segment_length in enumerate(segment_lengths):
                segment_percent = segment_length / total_length
                if segment_percent > 0 and segment_percent + total_percent > time:
                    return (
                        self._key_points[i],
                        self._key_points[i + 1],
                        (time - total_percent) / segment_percent,
                    )
                total_percent += segment_percent
        else:
            logger.debug("Resolving time %s on a curve with zero length", time)
        # time is at (or rounds past) the end of the curve
        return self._key_points[-2], self._key_points[-1], time

    def _evaluate(self, time, function, *args):
        start_point, end_point, segment_time = self.resolve_segment(time)
        return function(
            segment_time,
            *args,
            *SegmentMath.get_control_points(start_point, end_point),
        )

    def _get_up(self, up):
        return self.parameters["up"] if up is None else VectorUtil.to_vector(up)

    def get_position(self, time):
        """
        get the position at normalized time in [0, 1]
        """
        self._check_can_evaluate()
        if time < BOUNDARY_SNAP:
            return self._key_points[0].position
        if time > 1.0 - BOUNDARY_SNAP:
            return self._key_points[-1].position
        return self._evaluate(time, SegmentMath.position)

    def get_tangent(self, time):
        """
        get the unit tangent at normalized time,
        zero vector where the direction is undefined
        """
        return self._evaluate(time, SegmentMath.tangent)

    def get_binormal(self, time, up=None):
        return self._evaluate(time, SegmentMath.binormal, self._get_up(up))

    def get_normal(self, time, up=None):
        return self._evaluate(time, SegmentMath.normal, self._get_up(up))

    def get_rotation(self, time, up=None):
        """
        get a quaternion (x, y, z, w) facing along the tangent
        with the normal as up
        """
        return self._evaluate(time, SegmentMath.rotation, self._get_up(up))

    def sample(self, count, up=None):
        """
        evaluate count + 1 evenly spaced normalized times from 0 to 1,
        returns a list of CurvePointData with the polyline arc length
        from the start of the curve to each sample
        """
        if int(count) != count or count < 1:
            raise ValueError(f"sample count must be a positive integer, got {count}")
        self._check_can_evaluate()
        up = self._get_up(up)
        result = []
        arc_length = 0.0
        last_position = None
        for i in range(int(count) + 1):
            time = i / float(count)
            position = self.get_position(time)
            if last_position is not None:
                arc_length += float(np.linalg.norm(position - last_position))
            result.append(
                CurvePointData(
                    time,
                    position,
                    self.get_tangent(time),
                    self.get_normal(time, up),
                    arc_length,
                )
            )
            last_position = position
        return result

    def to_string(self):
        """
        string representation
        """
        return (
            f"CurveEvaluator(points={len(self._key_points)}, "
            f"sampling={self.sampling}, mode={self.parameters['sampling_mode']})"
        )
