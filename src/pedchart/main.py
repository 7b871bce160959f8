"""
1) Load a sample family.
2) Validate it for structural errors and missing medical data.
3) Compute the pedigree layout.
4) Plot the layout to an image or SVG file.
"""

import argparse
import logging
from pathlib import Path

from pedchart.errors import PedigreeError
from pedchart.layout import GenealogyEngine
from pedchart.plotting import plot_layout
from pedchart.sample_data import SAMPLES


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a sample pedigree chart.")
    parser.add_argument(
        "--sample",
        choices=sorted(SAMPLES),
        default="basic",
        help="Sample family to render (default: basic).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("pedigree.png"),
        help="Path to output file; png, svg or pdf (default: pedigree.png).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Loading sample family: {args.sample}")
    individuals, couples = SAMPLES[args.sample]()
    print(f"  Found {len(individuals)} individuals and {len(couples)} couples")

    engine = GenealogyEngine()

    print("Validating pedigree...")
    validation = engine.validate_genetic_consistency(individuals, couples)
    for error in validation.errors:
        print(f"    ERROR: {error}")
    for warning in validation.warnings:
        print(f"    warning: {warning}")
    if validation.is_valid and not validation.warnings:
        print("  No validation issues found")

    print("Computing layout...")
    try:
        layout = engine.calculate_tree_layout(individuals, couples)
    except PedigreeError as exc:
        print(f"  Layout failed: {exc}")
        return 1
    print(
        f"  {len(layout.generations)} generations, {len(layout.connections)} connections, "
        f"canvas {layout.canvas_size.width:g}x{layout.canvas_size.height:g}"
    )

    print(f"Plotting pedigree to: {args.output}")
    plot_layout(layout, args.output, engine.config)

    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
