"""Terms and operations: the named, optioned steps applied to an expression.

A Term is an operation name plus an ordered set of string options. An
Operation pairs a Term with the Operator that says how it is applied.
Both render to the canonical `<symbol><name>{k=v,...}` form used as the
pipeline lookup key.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

# Characters that force a value to be rendered as a quoted string literal.
_RESERVED_CHARS = frozenset('{}=,"')
# Characters never allowed in term names or option keys.
_IDENTIFIER_RESERVED_CHARS = _RESERVED_CHARS | {">", "|"}


class Operator(str, Enum):
    """Kind of transformation a node applies; the value is its symbol."""

    TRANSLATE = ">"
    EDIT = "|"

    @property
    def symbol(self) -> str:
        return self.value


def _check_identifier(what: str, v: str) -> str:
    if not v:
        raise ValueError(f"{what} must not be empty")
    if any(c in _IDENTIFIER_RESERVED_CHARS or c.isspace() for c in v):
        raise ValueError(
            f"{what} '{v}' must not contain whitespace or any of {{}}=,\"><|"
        )
    return v


def _format_value(value: str) -> str:
    if not value or any(c in _RESERVED_CHARS or c.isspace() for c in value):
        return json.dumps(value)
    return value


class Term(BaseModel):
    """A named operation instance with ordered string options."""

    model_config = ConfigDict(frozen=True)

    name: str
    options: tuple[tuple[str, str], ...] = ()

    @field_validator("name")
    @classmethod
    def name_is_identifier(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("term name must not be empty")
        return _check_identifier("term name", v)

    @field_validator("options", mode="before")
    @classmethod
    def options_from_mapping(cls, v: object) -> object:
        if isinstance(v, Mapping):
            return tuple(v.items())
        return v

    @field_validator("options")
    @classmethod
    def options_unique(
        cls, v: tuple[tuple[str, str], ...]
    ) -> tuple[tuple[str, str], ...]:
        # First position wins, last value wins.
        merged: dict[str, str] = {}
        for key, value in v:
            _check_identifier("option key", key)
            merged[key] = value
        return tuple(merged.items())

    def options_map(self) -> dict[str, str]:
        """Return the options as an insertion-ordered dict."""
        return dict(self.options)

    def option(self, key: str, default: str | None = None) -> str | None:
        return self.options_map().get(key, default)

    def with_option(self, key: str, value: str) -> Term:
        """Return a new Term with `key` set to `value`.

        A new key is appended after the existing options; an existing key
        keeps its position and only its value changes.
        """
        options = self.options_map()
        options[key] = value
        return Term(name=self.name, options=options)

    def with_options(self, options: Mapping[str, str]) -> Term:
        term = self
        for key, value in options.items():
            term = term.with_option(key, value)
        return term

    def __str__(self) -> str:
        rendered = ",".join(f"{k}={_format_value(v)}" for k, v in self.options)
        return f"{self.name}{{{rendered}}}"


class Operation(BaseModel):
    """An operator applied with a term, e.g. `>public{}`."""

    model_config = ConfigDict(frozen=True)

    operator: Operator
    term: Term

    @classmethod
    def create(cls, operator: Operator, term: Term) -> Operation:
        return cls(operator=operator, term=term)

    def __str__(self) -> str:
        return f"{self.operator.symbol}{self.term}"
