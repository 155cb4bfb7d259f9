"""
Command Line Entry Point
========================
Builds a week or month calendar and writes it as TikZ source or as a PDF.

Usage:
    $ python -m gridcalendar week 2025 2030 --width 48 --height 24 -o weeks.tex
    $ python -m gridcalendar month 2025 2034 --width 24 --height 18 -o months.pdf
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from gridcalendar.backends.plot import save_pdf
from gridcalendar.backends.tikz import to_tikz
from gridcalendar.calendar import CalendarPage, crop_command, month_calendar, week_calendar
from gridcalendar.config import DEFAULT_OPTIONS
from gridcalendar.logging_config import setup_logging
from gridcalendar.model.geometry import GridMode, SeparatorSpec
from gridcalendar.model.primitives import LineStyle

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gridcalendar", description="Large-format grid calendars.")
    ap.add_argument("kind", choices=["week", "month"], help="one column per ISO week or per month")
    ap.add_argument("first_year", type=int)
    ap.add_argument("last_year", type=int)
    ap.add_argument("--width", type=float, required=True, help="canvas width in inches")
    ap.add_argument("--height", type=float, required=True, help="canvas height in inches")
    ap.add_argument("--mode", choices=[m.value for m in GridMode], default=None,
                    help="grid style (default: gapped for weeks, rowbox for months)")
    ap.add_argument("--left-margin", type=float, default=None)
    ap.add_argument("--header-height", type=float, default=None)
    ap.add_argument("--gap", type=float, default=None)
    ap.add_argument("--line-width", type=float, default=None, help="box border thickness in points")
    ap.add_argument("--divider-style", choices=[s.value for s in LineStyle], default=None)
    ap.add_argument("--separator-every", type=int, default=0, help="heavy line after every N years (0 = off)")
    ap.add_argument("--separator-start", type=int, default=1)
    ap.add_argument("--no-dates", action="store_true", help="leave week cells empty")
    ap.add_argument("-o", "--output", type=Path, required=True, help=".tex or .pdf output file")
    ap.add_argument("--crop-hint", action="store_true", help="log the pdfcrop command for a letter-size test sheet")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def _build_page(args: argparse.Namespace) -> CalendarPage:
    if args.last_year < args.first_year:
        raise ValueError(f"last_year {args.last_year} is before first_year {args.first_year}.")
    years = list(range(args.first_year, args.last_year + 1))

    options = DEFAULT_OPTIONS.merged(
        left_margin=args.left_margin,
        header_height=args.header_height,
        gap=args.gap,
        line_width=args.line_width,
        divider_style=LineStyle(args.divider_style) if args.divider_style else None,
    )
    separators = SeparatorSpec(interval=args.separator_every, start_row=args.separator_start)

    if args.kind == "week":
        mode = GridMode(args.mode or GridMode.GAPPED)
        return week_calendar(years, args.width, args.height, options=options, mode=mode,
                             separators=separators, show_dates=not args.no_dates)
    mode = GridMode(args.mode or GridMode.ROW_BOX)
    return month_calendar(years, args.width, args.height, options=options, mode=mode, separators=separators)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        page = _build_page(args)
    except ValueError as e:
        logger.error(str(e))
        return 1

    output: Path = args.output
    if output.suffix.lower() == ".pdf":
        save_pdf(page.primitives, page.width, page.height, str(output))
    else:
        logger.info(f"Writing TikZ picture to: {output}")
        output.write_text(to_tikz(page.primitives) + "\n", encoding="utf-8")

    if args.crop_hint:
        pdf_name = output.name if output.suffix.lower() == ".pdf" else output.with_suffix(".pdf").name
        logger.info("To print the upper-left test section, run:")
        logger.info(crop_command(pdf_name, page.height))
    return 0


if __name__ == "__main__":
    sys.exit(main())
