"""Command line entry point: normalize a JSON:API document from a file or stdin."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from .errors import NormalizationError
from .normalizer import normalize
from .options import NormalizeOptions

LOGGER = logging.getLogger("jsonapi_normalizer.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonapi-normalize",
        description="Flatten a JSON:API document into a type/id keyed store.",
    )
    parser.add_argument("path", nargs="?", default="-", help="Path to a JSON:API document (default: stdin).")
    parser.add_argument("--endpoint", help="Endpoint the document was fetched from; enables the meta section.")
    parser.add_argument(
        "--no-filter-endpoint",
        dest="filter_endpoint",
        action="store_false",
        help="Key the meta section by the raw endpoint instead of base path and query string.",
    )
    parser.add_argument(
        "--no-camelize-keys",
        dest="camelize_keys",
        action="store_false",
        help="Keep attribute, link, meta and relationship names as they are.",
    )
    parser.add_argument(
        "--no-camelize-type-values",
        dest="camelize_type_values",
        action="store_false",
        help="Keep resource type values as they are.",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent the JSON output by this many spaces.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    return parser


def read_document(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(name)s: %(message)s")

    options = NormalizeOptions(
        endpoint=args.endpoint,
        filter_endpoint=args.filter_endpoint,
        camelize_keys=args.camelize_keys,
        camelize_type_values=args.camelize_type_values,
    )
    try:
        document = read_document(args.path)
        result = normalize(document, options)
    except OSError as exc:
        print(f"jsonapi-normalize: cannot read {args.path}: {exc}", file=sys.stderr)
        return 2
    except json.JSONDecodeError as exc:
        print(f"jsonapi-normalize: invalid JSON: {exc}", file=sys.stderr)
        return 2
    except NormalizationError as exc:
        print(f"jsonapi-normalize: {exc}", file=sys.stderr)
        return 2

    LOGGER.info("Normalized %s into %d top-level keys", args.path, len(result))
    print(json.dumps(result, indent=args.indent, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
