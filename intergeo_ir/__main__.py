import argparse
import logging
import sys
from typing import Optional, Sequence

from intergeo_ir import (
    Board,
    ConstructionError,
    IntergeoReader,
    MalformedDocumentStructure,
    ReaderOptions,
    Style,
    load_document,
)
from intergeo_ir.board import Circle, Line, Point

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _describe(handle: object) -> str:
    if isinstance(handle, Point):
        return f"point ({handle.x():.6f}, {handle.y():.6f})"
    if isinstance(handle, Line):
        c, a, b = handle.stdform()
        shape = "line" if handle.straight_first and handle.straight_last else "segment/ray"
        return f"{shape} {a:.6f}*x + {b:.6f}*y + {c:.6f} = 0"
    if isinstance(handle, Circle):
        x, y, r = handle.snapshot()
        return f"circle center=({x:.6f}, {y:.6f}) radius={r:.6f}"
    return repr(handle)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Import an Intergeo construction")
    parser.add_argument("path", help="Path to an .i2g archive or intergeo.xml file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--dependent-color",
        default="blue",
        help="Stroke and fill color of constructed points (default: blue)",
    )
    parser.add_argument(
        "--no-labels",
        action="store_true",
        help="Create elements without labels",
    )
    parser.add_argument(
        "--strict-exit",
        action="store_true",
        help="Exit with status 2 when constructs were skipped",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    options = ReaderOptions(
        dependent_style=Style(stroke_color=args.dependent_color, fill_color=args.dependent_color),
        with_label=not args.no_labels,
    )
    board = Board()
    reader = IntergeoReader(board, options)

    try:
        tree = load_document(args.path)
        reader.read(tree)
        failed = None
    except ConstructionError as exc:
        failed = exc
        logger.error("Import failed: %s", exc)
    except (OSError, MalformedDocumentStructure) as exc:
        logger.error("Cannot load %s: %s", args.path, exc)
        raise SystemExit(1)

    print("Objects:")
    for ident, entry in reader.store.items():
        if entry.exists:
            print(f"  {ident}: {_describe(entry.handle)}")
        else:
            print(f"  {ident}: (not constructed)")

    print("Diagnostics:")
    if reader.diagnostics:
        for diagnostic in reader.diagnostics:
            print(f"  - [{diagnostic.kind}] {diagnostic}")
    else:
        print("  (none)")

    if failed is not None:
        print(f"Import failed at {failed.kind or '?'} ({failed.ident or '?'}): {failed}")
        raise SystemExit(1)
    if args.strict_exit and reader.diagnostics:
        raise SystemExit(2)


if __name__ == "__main__":
    main(sys.argv[1:])
