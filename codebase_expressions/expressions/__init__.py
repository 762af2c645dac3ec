"""Expression data model: terms, operations, and the expression tree."""

from codebase_expressions.expressions.expression import (
    REFERENCE_FROM_CODEBASE,
    REFERENCE_TARGET_CODEBASE,
    AbstractExpression,
    EditExpression,
    Expression,
    RepositoryExpression,
    TranslateExpression,
)
from codebase_expressions.expressions.term import Operation, Operator, Term

__all__ = [
    "REFERENCE_FROM_CODEBASE",
    "REFERENCE_TARGET_CODEBASE",
    "AbstractExpression",
    "EditExpression",
    "Expression",
    "RepositoryExpression",
    "TranslateExpression",
    "Operation",
    "Operator",
    "Term",
]
