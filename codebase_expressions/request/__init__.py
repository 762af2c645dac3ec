"""Request documents: YAML/JSON descriptions of expressions to build."""

from codebase_expressions.request.loader import (
    ExpressionRequest,
    StepSpec,
    build_expression,
    load_request,
    parse_request,
)

__all__ = [
    "ExpressionRequest",
    "StepSpec",
    "build_expression",
    "load_request",
    "parse_request",
]
