#!/usr/bin/env python
# -*- coding: utf-8 -*-


class CurvePointData:
    """
    structure to store data for a point sampled on a curve
    """
    time = 0.0
    position = None
    tangent = None
    normal = None
    arc_length = 0.0

    def __init__(self, time, position, tangent, normal, arc_length):
        self.time = time
        self.position = position
        self.tangent = tangent
        self.normal = normal
        self.arc_length = arc_length

    def to_string(self):
        """
        string representation
        """
        return (
            f"CurvePointData(time={self.time}, position={self.position}, "
            f"arc_length={self.arc_length})"
        )

    def __iter__(self):
        yield "time", self.time
        yield "position", self.position
        yield "tangent", self.tangent
        yield "normal", self.normal
        yield "arc_length", self.arc_length
