#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import argparse
import pandas

from bezier_curves_util.curves import CurveEvaluator, CurveAnalyzer, HandleMode


def main():
    parser = argparse.ArgumentParser(
        description="Builds a Bezier curve from key points and samples it"
    )
    parser.add_argument(
        "points_path",
        help="the file path of a csv file with columns "
        "x, y, z and optionally left_x, left_y, left_z, right_x, right_y, right_z",
    )
    parser.add_argument("output_path", help="the file path for the sampled points csv")
    parser.add_argument(
        "--samples", type=int, default=100, help="the number of samples to write"
    )
    parser.add_argument(
        "--sampling", type=int, default=25, help="subdivisions per segment"
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    points = pandas.read_csv(args.points_path)
    curve = CurveEvaluator({"sampling": args.sampling, "verbose": args.verbose})
    for _, row in points.iterrows():
        key_point = curve.add_key_point()
        key_point.position = [row["x"], row["y"], row["z"]]
        if "left_x" in row:
            key_point.handle_mode = HandleMode.BROKEN
            key_point.left_offset = [row["left_x"], row["left_y"], row["left_z"]]
            key_point.right_offset = [row["right_x"], row["right_y"], row["right_z"]]
    logging.getLogger(__name__).info(
        "%s approximate length = %s", curve.to_string(), curve.approximate_length()
    )
    CurveAnalyzer.sample_dataframe(curve, args.samples).to_csv(
        args.output_path, index=False
    )


if __name__ == "__main__":
    main()
