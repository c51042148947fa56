"""
Command-line interface: centroid the profile scans of an mzML file.
"""

import argparse
import logging
import sys
from typing import Optional

from .detection import ExactMassDetectorParameters, detect_run
from .io import read_mzml
from .peakmodels import list_peak_models
from .utils import ParallelMode

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="profilecentroid",
        description="Detect exact masses in the profile spectra of an mzML/mzXML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Centroid MS1 scans with a noise level of 1000
  profilecentroid sample.mzML --noise-level 1000

  # Also remove shoulder peaks using a Gaussian model at resolution 60000
  profilecentroid sample.mzML --noise-level 1000 --clean-lateral --resolution 60000

  # All MS levels, 4 worker processes
  profilecentroid sample.mzML --ms-level 0 --workers 4
        """
    )

    parser.add_argument(
        "input",
        type=str,
        help="Path to an mzML or mzXML file"
    )

    parser.add_argument(
        "-n", "--noise-level",
        type=float,
        default=0.0,
        help="Intensity a local maximum must exceed to become a peak (default: 0)"
    )

    parser.add_argument(
        "-r", "--resolution",
        type=int,
        default=60000,
        help="Mass resolution used by the peak model (default: 60000)"
    )

    parser.add_argument(
        "--clean-lateral",
        action="store_true",
        help="Remove lateral (shoulder) peaks and left-side noise"
    )

    parser.add_argument(
        "-m", "--peak-model",
        type=str,
        choices=list_peak_models(),
        default="gaussian",
        help="Peak-shape model for lateral cleanup (default: gaussian)"
    )

    parser.add_argument(
        "--ms-level",
        type=int,
        default=1,
        help="MS level to process, 0 for all levels (default: 1)"
    )

    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=1,
        help="Number of worker processes (default: 1)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG)"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        parameters = ExactMassDetectorParameters(
            noise_level=args.noise_level,
            resolution=args.resolution,
            clean_lateral=args.clean_lateral,
            peak_model=args.peak_model,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        run = read_mzml(args.input)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 1

    logger.info(f"Loaded {args.input}: {run.summary()}")

    if args.workers > 1:
        mode, workers = ParallelMode.CUSTOM, args.workers
    else:
        mode, workers = ParallelMode.NONE, None

    results = detect_run(
        run,
        parameters,
        ms_level=args.ms_level or None,
        parallel_mode=mode,
        custom_workers=workers,
    )

    for scan_number, result in results.items():
        spectrum = run.get_by_scan(scan_number)
        line = f"{scan_number}\t{spectrum.retention_time:.2f}\t{len(result)}"
        if result.degraded:
            line += f"\t{result.error}"
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
