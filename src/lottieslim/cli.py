"""lottieslim CLI: optimize and validate animation files."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional

# Lossless passes that are on by default, as (flag suffix, option field).
SAFE_PASS_FLAGS = [
    ("remove-metadata", "remove_metadata"),
    ("remove-hidden-layers", "remove_hidden_layers"),
    ("remove-empty-groups", "remove_empty_groups"),
    ("simplify-keyframes", "simplify_keyframes"),
    ("remove-default-values", "remove_default_values"),
    ("round-decimals", "round_decimals"),
]

AGGRESSIVE_PASS_FLAGS = [
    ("remove-expressions", "remove_expressions", "Drop expression scripts (lossy)"),
    ("remove-effects", "remove_effects", "Drop layer effect stacks (lossy)"),
    ("collapse-transforms", "collapse_transforms", "Drop identity transform properties"),
    ("collapse-duplicate-keyframes", "collapse_duplicate_keyframes", "Turn constant animations into static values"),
]


def _build_options(args):
    from .kernel.options import OptimizationOptions

    values = {field: getattr(args, field) for _, field in SAFE_PASS_FLAGS}
    for _, field, _ in AGGRESSIVE_PASS_FLAGS:
        values[field] = args.aggressive or getattr(args, field)
    values["decimal_precision"] = args.precision
    return OptimizationOptions(**values)


def _run_optimize(args) -> int:
    from .api import format_bytes, optimize, savings_percentage
    from ._internal.canonical_json import canonical_dumps
    from ._internal.io.animation import InvalidAnimationError, load_animation, optimized_path, write_animation

    options = _build_options(args)
    output_dir: Optional[Path] = Path(args.out_dir).resolve() if args.out_dir else None

    exit_code = 0
    files: List[dict] = []
    for source in args.files:
        try:
            document = load_animation(source)
        except (InvalidAnimationError, FileNotFoundError) as e:
            print(f"Error: {e}", file=sys.stderr)
            exit_code = 1
            continue

        result = optimize(document, options)
        destination = optimized_path(source, output_dir)
        write_animation(result.optimized_animation, destination)
        files.append({
            "source": str(source),
            "output": str(destination),
            "original_size": result.original_size,
            "optimized_size": result.optimized_size,
            "savings": result.savings,
            "savings_percentage": round(result.savings_percentage, 2),
        })
        if not args.quiet:
            print(
                f"[OK] {source}: {format_bytes(result.original_size)} -> "
                f"{format_bytes(result.optimized_size)} "
                f"({result.savings_percentage:.2f}% saved)"
            )
            print(f"  Output: {destination}")

    total_original = sum(entry["original_size"] for entry in files)
    total_optimized = sum(entry["optimized_size"] for entry in files)
    total_percentage = savings_percentage(total_original, total_optimized)
    if len(files) > 1 and not args.quiet:
        print(
            f"Total: {format_bytes(total_original)} -> {format_bytes(total_optimized)} "
            f"({total_percentage:.2f}% saved)"
        )

    if args.report is not None:
        report = {
            "options": options.model_dump(),
            "files": files,
            "total": {
                "original_size": total_original,
                "optimized_size": total_optimized,
                "savings": total_original - total_optimized,
                "savings_percentage": round(total_percentage, 2),
            },
        }
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(canonical_dumps(report) + "\n", encoding="utf-8")
        if not args.quiet:
            print(f"  Report: {report_path}")

    return exit_code


def _run_validate(args) -> int:
    from ._internal.io.animation import InvalidAnimationError, load_animation

    exit_code = 0
    for source in args.files:
        try:
            load_animation(source)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            exit_code = 1
            continue
        except InvalidAnimationError as e:
            exit_code = 1
            if not args.quiet:
                print(f"[FAILED] {source}")
                if e.issues:
                    for issue in e.issues:
                        print(f"  {issue.code.value}: {issue.message}")
                else:
                    print(f"  {e}")
            continue
        if not args.quiet:
            print(f"[OK] {source}")
    return exit_code


def main():
    """Main CLI entry point for lottieslim commands."""
    try:
        lottieslim_version = get_version("lottieslim")
    except PackageNotFoundError:
        lottieslim_version = "dev"

    parser = argparse.ArgumentParser(
        prog="lottieslim",
        description="lottieslim: shrink Lottie animation JSON without changing how it renders"
    )
    parser.add_argument("--version", action="version", version=f"lottieslim {lottieslim_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each applied pass."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # optimize command
    optimize_parser = subparsers.add_parser(
        "optimize",
        help="Optimize one or more animation files",
        parents=[parent_parser]
    )
    optimize_parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Animation JSON files"
    )
    optimize_parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory for optimized files (defaults to beside each input)"
    )
    optimize_parser.add_argument(
        "--precision",
        type=int,
        choices=range(0, 5),
        default=2,
        help="Decimals kept when rounding numbers (0-4)"
    )
    optimize_parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a JSON size report to this path"
    )
    for flag, field in SAFE_PASS_FLAGS:
        optimize_parser.add_argument(
            f"--no-{flag}",
            dest=field,
            action="store_false",
            help=f"Skip the {flag.replace('-', ' ')} pass"
        )
    for flag, field, help_text in AGGRESSIVE_PASS_FLAGS:
        optimize_parser.add_argument(
            f"--{flag}",
            dest=field,
            action="store_true",
            help=help_text
        )
    optimize_parser.add_argument(
        "--aggressive",
        action="store_true",
        help="Enable every lossy pass"
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that files are optimizable animation documents",
        parents=[parent_parser]
    )
    validate_parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Animation JSON files"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "optimize":
            exit_code = _run_optimize(args)
        elif args.command == "validate":
            exit_code = _run_validate(args)
        else:
            parser.print_help()
            exit_code = 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
