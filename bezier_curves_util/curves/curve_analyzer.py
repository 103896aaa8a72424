#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np
import pandas as pd

from .segment_math import SegmentMath
from .curve_evaluator import MIN_CURVE_LENGTH


class CurveAnalyzer:
    """
    Tabulate data from a CurveEvaluator
    """

    @staticmethod
    def segment_dataframe(curve):
        """
        Get a DataFrame with one row per segment:
        its approximate length, its share of the total length
        and the normalized time where it ends
        """
        segment_lengths = np.array(curve.get_segment_lengths())
        total_length = np.sum(segment_lengths)
        fractions = (
            segment_lengths / total_length
            if total_length > MIN_CURVE_LENGTH
            else np.zeros(len(segment_lengths))
        )
        return pd.DataFrame(
            {
                "start_index": np.arange(len(segment_lengths)),
                "end_index": np.arange(1, len(segment_lengths) + 1),
                "length": segment_lengths,
                "fraction": fractions,
                "cumulative_fraction": np.cumsum(fractions),
            }
        )

    @staticmethod
    def sample_dataframe(curve, count, up=None):
        """
        Get a DataFrame of count + 1 evenly spaced samples along the curve
        with columns for time, arc length, position, tangent and normal
        """
        samples = curve.sample(count, up)
        data = {
            "time": [sample.time for sample in samples],
            "arc_length": [sample.arc_length for sample in samples],
        }
        for name in ["position", "tangent", "normal"]:
            values = np.array([getattr(sample, name) for sample in samples])
            for axis, axis_name in enumerate(["x", "y", "z"]):
                data[f"{name}_{axis_name}"] = values[:, axis]
        return pd.DataFrame(data)

    @staticmethod
    def length_convergence(curve, samplings):
        """
        Get a DataFrame comparing the approximate length of every segment
        at each sampling to the numerically integrated length
        """
        key_points = curve.key_points
        reference_length = sum(
            SegmentMath.integrated_length(
                *SegmentMath.get_control_points(key_points[i], key_points[i + 1])
            )
            for i in range(len(key_points) - 1)
        )
        rows = []
        for sampling in samplings:
            length = sum(
                SegmentMath.approximate_length(
                    *SegmentMath.get_control_points(key_points[i], key_points[i + 1]),
                    sampling,
                )
                for i in range(len(key_points) - 1)
            )
            rows.append(
                {
                    "sampling": sampling,
                    "approximate_length": length,
                    "integrated_length": reference_length,
                    "error": reference_length - length,
                }
            )
        return pd.DataFrame(
            rows,
            columns=["sampling", "approximate_length", "integrated_length", "error"],
        )
