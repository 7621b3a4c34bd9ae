import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from geofigure import (
    ExportConfig,
    GeometryBuilder,
    NullBuilder,
    StructuralError,
    figure_to_json,
    parse_figure,
    print_figure,
    read_figure_text,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Parse and re-render JSON figure files")
    parser.add_argument("path", help="Path to the figure JSON file (comments allowed)")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output rendering (default: text)",
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Check the file without building the figure",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=4,
        help="Spaces per nesting level (default: 4)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--output",
        help="Write the rendering to this path instead of stdout",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Reading figure from %s", args.path)
    text = read_figure_text(args.path)

    builder = NullBuilder() if args.validate_only else GeometryBuilder()
    try:
        figure = parse_figure(text, builder)
    except StructuralError as exc:
        logger.error("%s: %s", args.path, exc)
        raise SystemExit(1)

    if figure is None:
        print(f"{args.path}: OK")
        return

    config = ExportConfig(indent_width=args.indent, json_indent=args.indent)
    if args.format == "json":
        rendered = figure_to_json(figure, config=config) + "\n"
    else:
        rendered = print_figure(figure, config=config)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing %s rendering to %s", args.format, output_path)
        output_path.write_text(rendered, encoding="utf-8")
    else:
        sys.stdout.write(rendered)


if __name__ == "__main__":
    main(sys.argv[1:])
