#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .control_handle import ControlHandle, HandleMode  # noqa: F401
from .segment_math import SegmentMath  # noqa: F401
from .curve_evaluator import CurveEvaluator, DEFAULT_PARAMETERS  # noqa: F401
from .curve_analyzer import CurveAnalyzer  # noqa: F401
from .curve_errors import (  # noqa: F401
    CurveError,
    InvalidIndexError,
    MinimumPointsViolationError,
)
