import argparse
from pathlib import Path
import sys
from typing import Optional, Sequence

from dts_to_cjs.global_vars import init_logger
from dts_to_cjs.package_name import package_namespace_name, static_namespace_name
from dts_to_cjs.processor.cpu_processor import convert_declarations
from dts_to_cjs.utils import DEFAULT_IGNORE, DEFAULT_OUT_DIR, DEFAULT_PATTERN


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate CommonJS (.d.cts) declaration files from .d.ts files")
    parser.add_argument(
        "--out-dir", type=Path, default=DEFAULT_OUT_DIR, help="Build output directory holding the .d.ts files"
    )
    parser.add_argument(
        "--pattern", type=str, default=DEFAULT_PATTERN, help=f"Glob for .d.ts files (default: {DEFAULT_PATTERN})"
    )
    parser.add_argument(
        "--ignore",
        type=str,
        action="append",
        help="Glob of files to leave alone, may be repeated (default: **/*.d.cts and **/*.d.mts)",
    )
    parser.add_argument("--num-workers", type=int, default=1, help="Number of worker processes (0: one per CPU)")

    naming = parser.add_mutually_exclusive_group()
    naming.add_argument("--namespace-name", type=str, help="Use this namespace name for every file")
    naming.add_argument(
        "--package-json", type=Path, help="Name namespaces after the camelCased name in this package.json"
    )

    parser.add_argument(
        "--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logger = init_logger(level=args.log_level)

    try:
        if args.namespace_name:
            get_namespace_name = static_namespace_name(args.namespace_name)
        elif args.package_json:
            get_namespace_name = package_namespace_name(args.package_json)
        else:
            get_namespace_name = None

        summary = convert_declarations(
            out_dir=args.out_dir,
            pattern=args.pattern,
            ignore=tuple(args.ignore) if args.ignore else DEFAULT_IGNORE,
            get_namespace_name=get_namespace_name,
            n_workers=args.num_workers,
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Error during .d.ts to .d.cts conversion: {e}")
        return 1

    return 1 if summary["failed"] else 0


if __name__ == "__main__":
    sys.exit(main())
