#!/usr/bin/env python
# -*- coding: utf-8 -*-


class CurveError(Exception):
    """
    Base class for errors raised by curve operations
    """
    pass


class InvalidIndexError(CurveError, IndexError):
    """
    A key point index is outside the valid range
    """

    def __init__(self, index, valid_range):
        self.index = index
        self.valid_range = valid_range
        super().__init__(
            f"Key point index {index} is outside [{valid_range[0]}, {valid_range[1]}]"
        )


class MinimumPointsViolationError(CurveError):
    """
    The operation needs or would leave fewer than the minimum number of key points
    """

    def __init__(self, point_count, message=""):
        self.point_count = point_count
        super().__init__(
            message
            if message
            else f"A curve needs at least 2 key points, it has {point_count}"
        )
