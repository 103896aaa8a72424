#!/usr/bin/env python
# -*- coding: utf-8 -*-

import sys
import runpy
import logging
from pathlib import Path

import pandas as pd


CURVE_EXAMPLE = Path(__file__).parents[2] / "examples" / "curve" / "curve.py"


def test_curve_example(tmp_path, monkeypatch, caplog):
    points_path = tmp_path / "points.csv"
    output_path = tmp_path / "samples.csv"
    pd.DataFrame(
        {"x": [0.0, 1.0, 2.0], "y": [0.0, 1.0, 0.0], "z": [0.0, 0.0, 1.0]}
    ).to_csv(points_path, index=False)
    monkeypatch.setattr(
        sys,
        "argv",
        ["curve.py", str(points_path), str(output_path), "--samples", "10"],
    )
    with caplog.at_level(logging.INFO):
        runpy.run_path(str(CURVE_EXAMPLE), run_name="__main__")
    assert any(
        record.levelno == logging.INFO and "approximate length" in record.getMessage()
        for record in caplog.records
    )
    samples = pd.read_csv(output_path)
    assert len(samples) == 11
    assert samples["position_x"].iloc[-1] == 2.0
