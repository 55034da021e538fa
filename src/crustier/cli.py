"""Command-line interface for crustier.

Draws a diagram (the built-in sample, or one loaded from a JSON/YAML
document) into one or more renderers: the recording renderer for a textual
dump, a JSONL operation log, and the pygame backend for a PNG or window.
"""

from __future__ import annotations

import argparse
import logging
import sys

from crustier import __version__
from crustier.config import make_runtime_config, parse_size
from crustier.core.shapes import Drawable
from crustier.data.diagrams import DiagramLoadError, load_diagram_file
from crustier.examples.sample import sample_diagram
from crustier.render.recording import RecordingRenderer
from crustier.tools.record_replay import JsonlOperationReader, write_operations

logger = logging.getLogger(__name__)


def _size_arg(text: str) -> str:
    try:
        parse_size(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crustier",
        description="Draw a diagram through the Drawable/Renderer protocol.",
    )
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Diagram document (.json, .yml, .yaml); default: built-in sample",
    )
    parser.add_argument(
        "--print",
        dest="print_ops",
        action="store_true",
        help="Print recorded renderer operations (default when no other output)",
    )
    parser.add_argument("--png", metavar="PATH", help="Render headless to a PNG file")
    parser.add_argument(
        "--window", action="store_true", help="Show the diagram in a window"
    )
    parser.add_argument(
        "--record", metavar="PATH", help="Write renderer operations as JSONL"
    )
    parser.add_argument(
        "--replay",
        metavar="PATH",
        help="Print operations from a JSONL log instead of drawing a diagram",
    )
    parser.add_argument(
        "--size", type=_size_arg, default=None, help="Canvas size as WIDTHxHEIGHT"
    )
    parser.add_argument("--title", default=None, help="Window title")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _print_operations(rec: RecordingRenderer) -> None:
    for line in rec.operations:
        print(line)


def _load_shape(args: argparse.Namespace) -> Drawable:
    if args.file:
        return load_diagram_file(args.file)
    return sample_diagram()


def run(args: argparse.Namespace) -> int:
    if args.replay:
        reader = JsonlOperationReader(args.replay)
        try:
            _print_operations(reader.to_recording())
        except OSError as e:
            print(f"Replay failed: {e}", file=sys.stderr)
            return 1
        return 0

    try:
        shape = _load_shape(args)
    except DiagramLoadError as e:
        print(f"Cannot load diagram: {e}", file=sys.stderr)
        return 1

    rec = RecordingRenderer()
    shape.draw(rec)
    logger.debug("diagram produced %d operations", len(rec))

    if args.record:
        try:
            n = write_operations(args.record, rec)
        except OSError as e:
            print(f"Cannot write {args.record}: {e}", file=sys.stderr)
            return 1
        logger.info("recorded %d operations to %s", n, args.record)

    if args.png or args.window:
        # Imported lazily: pygame is only needed for raster output.
        from crustier.app.show import show_diagram

        cfg = make_runtime_config(args=args)
        try:
            show_diagram(
                args.title,
                shape.draw,
                png_path=args.png,
                window=args.window,
                config=cfg,
            )
        except (OSError, RuntimeError) as e:
            print(f"Cannot render to {args.png or 'window'}: {e}", file=sys.stderr)
            return 1

    if args.print_ops or not (args.png or args.window or args.record):
        _print_operations(rec)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Synchronous entrypoint for the crustier CLI; returns the exit status."""
    args = parse_args(argv)

    if args.version:
        print(f"crustier {__version__}")
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
