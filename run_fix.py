# run_fix.py
import argparse
import logging
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from runningfix.fix_finder import FixFinder, FixFinderConfig


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Intersect every pair of bearing observations in a file.")
    parser.add_argument("bearings_file", help="Delimited file of latitude, longitude, bearing[, declination] records")
    parser.add_argument("--delimiter", default=",", help="Field delimiter (default: ',')")
    parser.add_argument("--strict", action="store_true", help="Abort on the first malformed record instead of skipping it")
    parser.add_argument("--map", dest="map_path", help="Write an interactive HTML map of rays and fixes to this path")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(asctime)s - %(levelname)s - %(message)s')

    config = FixFinderConfig(delimiter=args.delimiter, strict=args.strict)
    finder = FixFinder(config)

    print("--- Starting Running Fix ---")
    print(f"Source: {args.bearings_file}")
    print("-" * 40)

    response = finder.run(args.bearings_file)
    if not response["success"]:
        print(f"\n[!] Could not process bearings. {response['data']['error_type']}: {response['message']}")
        return 1

    report = response["data"]["report"]
    for result in report.pair_results:
        label = f"  > Pair {result.first_index} x {result.second_index}"
        if result.success:
            print(f"{label}: Fix {result.fix} | Baseline {result.baseline_km:.3f} km")
        else:
            print(f"{label}: {result.error_type}: {result.error_message}")

    summary = report.summary()
    print("-" * 40)
    print(f"Pairs processed: {summary['pairs_processed']}")
    print(f"Intersections found: {summary['fixes_found']}")
    if summary["centroid"] is not None:
        print(f"Mean fix: {summary['centroid']}")
    print(f"Elapsed time: {summary['elapsed_seconds']:.6f}s")

    if args.map_path:
        from runningfix.fix_finder.visualization import FixMapVisualizer
        FixMapVisualizer(config).create_fix_map(report).save(args.map_path)
        print(f"Map saved to {args.map_path}")

    print("\n--- Running Fix Complete ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
