"""CLI tool for building codebase expressions and printing their canonical form.

Usage:
    python3 scripts/build_expression.py --repository myRepo --translate-to public
    python3 scripts/build_expression.py --request request.yaml
    python3 scripts/build_expression.py --request request.yaml --reference-target target.yaml --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Run expression builder CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 on success,
                   1 on an invalid request,
                   2 on any other error.
    """
    parser = argparse.ArgumentParser(
        description="Build a codebase expression and print its canonical string."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--request",
        default=None,
        help="Path to a YAML or JSON expression request.",
    )
    source.add_argument(
        "--repository",
        default=None,
        help="Name of the repository at the root of the expression.",
    )
    parser.add_argument(
        "--revision",
        default=None,
        help="Revision to pin the repository to (used with --repository).",
    )
    parser.add_argument(
        "--translate-to",
        action="append",
        default=[],
        help="Project space to translate into; repeat for chained translations.",
    )
    parser.add_argument(
        "--reference-target",
        default=None,
        help="Request file describing the reference to-codebase.",
    )
    parser.add_argument(
        "--reference-from",
        default=None,
        help="Request file describing the reference from-codebase.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the expression tree as JSON instead of its canonical string.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)
    if args.request and (args.revision or args.translate_to):
        parser.error("--revision and --translate-to require --repository")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from codebase_expressions.errors import ConfigurationError
    from codebase_expressions.request import (
        ExpressionRequest,
        StepSpec,
        build_expression,
        load_request,
    )

    try:
        if args.request:
            request = load_request(Path(args.request))
        else:
            request = ExpressionRequest(
                repository=args.repository,
                revision=args.revision,
                steps=[StepSpec(translate=space) for space in args.translate_to],
            )

        updates = {}
        if args.reference_target:
            updates["reference_target"] = load_request(Path(args.reference_target))
        if args.reference_from:
            updates["reference_from"] = load_request(Path(args.reference_from))
        if updates:
            request = request.model_copy(update=updates)

        expression = build_expression(request)

    except (ValueError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(expression.model_dump_json(indent=2))
    else:
        print(expression)
    return 0


if __name__ == "__main__":
    sys.exit(main())
