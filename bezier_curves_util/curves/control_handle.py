#!/usr/bin/env python
# -*- coding: utf-8 -*-

from enum import Enum

from ..common import VectorUtil


DEFAULT_LEFT_OFFSET = (-0.5, 0.0, 0.0)
DEFAULT_RIGHT_OFFSET = (0.5, 0.0, 0.0)


class HandleMode(Enum):
    """
    Whether a key point's two tangent offsets are kept opposite
    """
    CONNECTED = "connected"
    BROKEN = "broken"


class ControlHandle:
    """
    A key point on a curve: an anchor position
    and two tangent control offsets relative to it
    """

    def __init__(
        self,
        position=None,
        left_offset=DEFAULT_LEFT_OFFSET,
        right_offset=None,
        handle_mode=HandleMode.CONNECTED,
    ):
        """
        position defaults to the origin,
        right_offset defaults to -left_offset if the handle is connected
        and to the default right offset otherwise
        """
        self.curve = None
        self._handle_mode = HandleMode(handle_mode)
        self._position = (
            VectorUtil.zero() if position is None else VectorUtil.to_vector(position)
        )
        self._left_offset = VectorUtil.to_vector(left_offset)
        if right_offset is None:
            if self._handle_mode == HandleMode.CONNECTED:
                self._right_offset = -self._left_offset
            else:
                self._right_offset = VectorUtil.to_vector(DEFAULT_RIGHT_OFFSET)
        else:
            # the right offset wins when both are given to a connected handle
            self.right_offset = right_offset

    @property
    def handle_mode(self):
        return self._handle_mode

    @handle_mode.setter
    def handle_mode(self, value):
        """
        connecting a broken handle mirrors the left offset onto the right one
        """
        self._handle_mode = HandleMode(value)
        if self._handle_mode == HandleMode.CONNECTED:
            self._right_offset = -self._left_offset

    @property
    def position(self):
        return self._position.copy()

    @position.setter
    def position(self, value):
        self._position = VectorUtil.to_vector(value)

    @property
    def left_offset(self):
        return self._left_offset.copy()

    @left_offset.setter
    def left_offset(self, value):
        self._left_offset = VectorUtil.to_vector(value)
        if self._handle_mode == HandleMode.CONNECTED:
            self._right_offset = -self._left_offset

    @property
    def right_offset(self):
        return self._right_offset.copy()

    @right_offset.setter
    def right_offset(self, value):
        self._right_offset = VectorUtil.to_vector(value)
        if self._handle_mode == HandleMode.CONNECTED:
            self._left_offset = -self._right_offset

    @property
    def left_handle_position(self):
        """
        the incoming tangent control point, in the same space as position
        """
        return self._position + self._left_offset

    @left_handle_position.setter
    def left_handle_position(self, value):
        self.left_offset = VectorUtil.to_vector(value) - self._position

    @property
    def right_handle_position(self):
        """
        the outgoing tangent control point, in the same space as position
        """
        return self._position + self._right_offset

    @right_handle_position.setter
    def right_handle_position(self, value):
        self.right_offset = VectorUtil.to_vector(value) - self._position

    def to_string(self):
        """
        string representation
        """
        return (
            f"ControlHandle(position={self._position}, left={self._left_offset}, "
            f"right={self._right_offset}, mode={self._handle_mode.value})"
        )

    def __iter__(self):
        yield "position", self.position
        yield "left_offset", self.left_offset
        yield "right_offset", self.right_offset
        yield "handle_mode", self._handle_mode.value
