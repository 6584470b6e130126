"""
Census Scatter - Poverty vs. Healthcare Chart

Render a scatter chart of lacking healthcare (%) against poverty (%) for
each U.S. state from a CSV file.

Usage:
    python main.py <csv_path> [--output chart.svg] [--show]

Examples:
    python main.py data/data.csv
    python main.py data/data.csv -o chart.png
    python main.py data/data.csv --show
"""
import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from census_scatter.config.chart_config import (
    ChartRenderError,
    DEFAULT_SURFACE,
    SUPPORTED_OUTPUT_FORMATS,
    SurfaceConfig,
)
from census_scatter.pipeline import render_chart_from_file, save_chart
from census_scatter.rendering.hover import HoverTooltipBinding


def main(argv=None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Render a poverty vs. healthcare scatter chart from a census CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py data.csv                    # Write scatter.svg
  python main.py data.csv -o chart.png       # Save as PNG
  python main.py data.csv --show             # Interactive window with tooltips
        """
    )
    parser.add_argument(
        "csv",
        type=str,
        help="Path to CSV with state, abbr, poverty and healthcare columns"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default="scatter.svg",
        help="Output file (.svg, .png or .pdf, default: scatter.svg)"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open an interactive window with hover tooltips"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_SURFACE.width,
        help=f"Surface width in pixels (default: {DEFAULT_SURFACE.width})"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_SURFACE.height,
        help=f"Surface height in pixels (default: {DEFAULT_SURFACE.height})"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Validate output format before doing any work
    output_path = Path(args.output)
    if output_path.suffix.lower() not in SUPPORTED_OUTPUT_FORMATS:
        print(
            f"Error: Unsupported output format: {output_path.suffix}\n"
            f"Supported formats: {', '.join(SUPPORTED_OUTPUT_FORMATS)}",
            file=sys.stderr
        )
        return 1

    surface = SurfaceConfig(width=args.width, height=args.height)

    try:
        chart = render_chart_from_file(args.csv, surface=surface)
        save_chart(chart, output_path)
    except ChartRenderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Failed to write output file: {e}", file=sys.stderr)
        return 1

    print(f"Chart saved to: {output_path}")

    if args.show and not chart.is_blank:
        HoverTooltipBinding(chart).connect()
        plt.show()
    else:
        chart.close()

    return 1 if chart.is_blank else 0


if __name__ == "__main__":
    sys.exit(main())
