#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .vector_util import VectorUtil  # noqa: F401
from .curve_point_data import CurvePointData  # noqa: F401
