"""Request loader: build expressions from YAML or JSON request documents.

A request names a repository, the translate/edit steps applied to it, and
optionally the reference codebases threaded into the final translation:

    repository: myRepo
    revision: "1234"
    steps:
      - translate: public
      - edit: renamer
        options:
          regex: "true"
      - translate: internal
    reference_target:
      repository: internalRepo
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from codebase_expressions.expressions import (
    AbstractExpression,
    RepositoryExpression,
    TranslateExpression,
)

logger = logging.getLogger(__name__)


def _stringify(v: object) -> object:
    # YAML scalars such as `1234` or `true` arrive as int/bool.
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float):
        # `1.10` would come back as "1.1"; the original text is lost.
        raise ValueError(f"numeric value {v!r} is ambiguous; quote it in the request")
    if isinstance(v, int):
        return str(v)
    return v


class StepSpec(BaseModel):
    """A single translate or edit step."""

    model_config = ConfigDict()

    translate: str | None = None
    edit: str | None = None
    options: dict[str, str] = Field(default_factory=dict)

    @field_validator("options", mode="before")
    @classmethod
    def options_as_strings(cls, v: object) -> object:
        if isinstance(v, dict):
            return {str(k): _stringify(val) for k, val in v.items()}
        return v

    @model_validator(mode="after")
    def exactly_one_kind(self) -> StepSpec:
        if (self.translate is None) == (self.edit is None):
            raise ValueError("step must set exactly one of 'translate' or 'edit'")
        return self


class ExpressionRequest(BaseModel):
    """Description of an expression to build."""

    model_config = ConfigDict()

    repository: str
    revision: str | None = None
    repository_options: dict[str, str] = Field(default_factory=dict)
    steps: list[StepSpec] = Field(default_factory=list)
    reference_target: ExpressionRequest | None = None
    reference_from: ExpressionRequest | None = None

    @field_validator("repository")
    @classmethod
    def repository_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("repository must not be empty")
        return v

    @field_validator("revision", mode="before")
    @classmethod
    def revision_as_string(cls, v: object) -> object:
        return _stringify(v)

    @field_validator("repository_options", mode="before")
    @classmethod
    def repository_options_as_strings(cls, v: object) -> object:
        if isinstance(v, dict):
            return {str(k): _stringify(val) for k, val in v.items()}
        return v


def parse_request(data: object) -> ExpressionRequest:
    """Validate an already-parsed request document."""
    if not isinstance(data, dict):
        raise ValueError("request document must be a mapping")
    return ExpressionRequest.model_validate(data)


def load_request(path: Path) -> ExpressionRequest:
    """Load a request document from a .yaml/.yml or .json file.

    Raises:
        ValueError: If the file is missing or its content is not a valid request.
    """
    if not path.is_file():
        raise ValueError(f"request file not found: {path}")

    content = path.read_text(encoding="utf-8")
    logger.debug("Loading expression request from %s", path)

    if path.suffix == ".json":
        return ExpressionRequest.model_validate_json(content)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"invalid YAML in {path}: {e}") from e
    return parse_request(data)


def build_expression(request: ExpressionRequest) -> AbstractExpression:
    """Build the expression a request describes.

    Reference codebases are threaded into the final step, which must then be
    a translate step.
    """
    expression: AbstractExpression = RepositoryExpression.create(
        request.repository, request.repository_options
    )
    if request.revision is not None:
        expression = expression.at_revision(request.revision)

    for step in request.steps:
        if step.translate is not None:
            expression = expression.translate_to(step.translate, step.options)
        else:
            expression = expression.edit_with(step.edit, step.options)

    if request.reference_target is not None or request.reference_from is not None:
        expression = _with_references(expression, request)

    logger.debug("Built expression %s", expression)
    return expression


def _with_references(
    expression: AbstractExpression, request: ExpressionRequest
) -> TranslateExpression:
    if not isinstance(expression, TranslateExpression):
        raise ValueError(
            "reference codebases require the final step to be a translate step"
        )

    if request.reference_target is not None:
        expression = expression.with_reference_target_codebase(
            build_expression(request.reference_target)
        )
    if request.reference_from is not None:
        expression = expression.with_reference_from_codebase(
            build_expression(request.reference_from)
        )
    return expression
