"""
Command-line entry point for splinegen.

Usage:
    splinegen                          regenerate everything into the configured root
    splinegen --list                   list the generated type names
    splinegen --only BezierCubic3D     regenerate selected types
    splinegen --dry-run                derive everything, write nothing
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .pipeline.enumeration import build_name_index, resolve_artifact_key
from .pipeline.regenerate import SplineCodegenPipeline
from .utils.config import SplinegenConfig, set_config
from .utils.exceptions import SplinegenError
from .utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="splinegen", description="Generate spline segment and matrix types")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("--config", dest="config_file", help="Path to a YAML or JSON configuration file")
    ap.add_argument("--output-root", help="Directory to write generated files below")
    ap.add_argument("--only", nargs="+", metavar="TYPE", help='Generate only these types (e.g., "BezierCubic3D")')
    ap.add_argument("--dry-run", action="store_true", help="Generate without writing any file")
    ap.add_argument("--list", dest="list_types", action="store_true", help="List the generated type names and exit")
    ap.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    help="Override the configured log level")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the splinegen command."""
    args = build_parser().parse_args(argv)

    try:
        config = SplinegenConfig(args.config_file)
        log_file = config.logging.log_file if config.logging.enable_file_logging else None
        setup_logging(args.log_level or config.logging.level, log_file)
        set_config(config)

        pipeline = SplineCodegenPipeline(config)
        keys = pipeline.enumerate()
        if args.only:
            index = build_name_index(keys)
            keys = [resolve_artifact_key(name, index) for name in args.only]

        if args.list_types:
            for key in keys:
                print(key.type_name)
            return 0

        report = pipeline.run(keys, write=not args.dry_run, output_root=args.output_root)
    except SplinegenError as e:
        print(f"splinegen: {e}", file=sys.stderr)
        return 1

    for path in report.written:
        print(path)
    for failure in report.failures.values():
        print(f"splinegen: {failure}", file=sys.stderr)
    return 0 if report.succeeded else 1


if __name__ == '__main__':
    sys.exit(main())
