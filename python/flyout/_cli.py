"""Command line entry point: render a dropdown described in a JSON file.

    $ flyout menu.json
    $ echo '{"field": "sort", "name": "Sort", "content": ["A", "B"]}' | flyout -
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from flyout.content import build
from flyout.dropdown import assemble
from flyout.errors import MenuError
from flyout.options import MenuDocument

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="flyout",
        description="Render a flyout dropdown menu from a JSON description.",
    )
    parser.add_argument(
        "path",
        help='JSON file with "field", "name", "content" and optional "options" ("-" reads stdin).',
    )
    parser.add_argument(
        "--items-only",
        action="store_true",
        help="Print only the <ul> menu markup, without trigger and script.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Python logging level (default: WARNING)")
    return parser.parse_args(argv)


def load_document(path: str) -> MenuDocument:
    """Read and validate a menu document from a file path or "-" for stdin."""
    try:
        if path == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MenuError(f"{path} is not UTF-8 text", original_error=e) from e

    try:
        return MenuDocument.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise MenuError(f"{path} is not valid JSON", original_error=e) from e
    except ValidationError as e:
        raise MenuError(f"{path} is not a valid menu document", original_error=e) from e


def render_document(document: MenuDocument, items_only: bool = False) -> str:
    if items_only:
        return build(document.content)
    return assemble(document.field, document.name, document.content, document.options)


def main(argv=None):
    """Run the flyout CLI."""
    args = parse_args(argv)
    # Markup goes to stdout, log records to stderr
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        stream=sys.stderr,
    )

    try:
        document = load_document(args.path)
        output = render_document(document, items_only=args.items_only)
    except (MenuError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Rendered menu for field %r", document.field)
    print(output)


if __name__ == "__main__":
    main()
