"""Expression tree: repository leaves and the translate/edit nodes over them.

Every node is a frozen pydantic model. Equality and hashing go through the
canonical string, so two expressions are equal exactly when they describe
the same codebase the same way. `Expression` is the discriminated union of
the variants and is what node fields and JSON round-trips are typed as.

Example:
    >>> repo = RepositoryExpression.create("myRepo")
    >>> str(repo.translate_to("public"))
    'myRepo>public{}'
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Mapping
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from codebase_expressions.errors import ConfigurationError
from codebase_expressions.expressions.term import Operation, Operator, Term

logger = logging.getLogger(__name__)

REFERENCE_TARGET_CODEBASE = "referenceTargetCodebase"
REFERENCE_FROM_CODEBASE = "referenceFromCodebase"
REVISION = "revision"


class AbstractExpression(BaseModel):
    """Common capability of all expression nodes."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def __str__(self) -> str:
        """Canonical serialization of this expression."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractExpression):
            return NotImplemented
        return type(self) is type(other) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def translate_to(
        self, project_space: str, options: Mapping[str, str] | None = None
    ) -> TranslateExpression:
        """Describe translating this expression's codebase into `project_space`."""
        return TranslateExpression(
            to_translate=self,
            operation=Operation.create(
                Operator.TRANSLATE, Term(name=project_space, options=options or {})
            ),
        )

    def edit_with(
        self, editor_name: str, options: Mapping[str, str] | None = None
    ) -> EditExpression:
        """Describe running the named editor over this expression's codebase."""
        return EditExpression(
            to_edit=self,
            operation=Operation.create(
                Operator.EDIT, Term(name=editor_name, options=options or {})
            ),
        )


class RepositoryExpression(AbstractExpression):
    """Leaf expression naming a source repository, e.g. `myRepo`."""

    kind: Literal["repository"] = "repository"
    term: Term

    @classmethod
    def create(
        cls, name: str, options: Mapping[str, str] | None = None
    ) -> RepositoryExpression:
        return cls(term=Term(name=name, options=options or {}))

    @property
    def repository_name(self) -> str:
        return self.term.name

    def option(self, key: str) -> str | None:
        return self.term.option(key)

    def with_option(self, key: str, value: str) -> RepositoryExpression:
        return RepositoryExpression(term=self.term.with_option(key, value))

    def at_revision(self, revision: str) -> RepositoryExpression:
        """Pin this repository to a specific revision."""
        return self.with_option(REVISION, revision)

    def __str__(self) -> str:
        if not self.term.options:
            return self.term.name
        return str(self.term)


class TranslateExpression(AbstractExpression):
    """Translation of a child expression's codebase into another project space.

    For example, `RepositoryExpression.create("myRepo").translate_to("public")`
    describes `myRepo>public{}`.
    """

    kind: Literal["translate"] = "translate"
    to_translate: Expression
    operation: Operation

    @model_validator(mode="after")
    def operator_is_translate(self) -> TranslateExpression:
        if self.operation.operator is not Operator.TRANSLATE:
            raise ConfigurationError(
                f"TranslateExpression requires a {Operator.TRANSLATE.name} "
                f"operation, got {self.operation.operator.name} ({self.operation})"
            )
        return self

    def with_reference_target_codebase(
        self, reference_target_codebase: AbstractExpression
    ) -> TranslateExpression:
        """Return this translation with the given reference to-codebase.

        Inverse translation uses it to inspect changes such as renamings in
        the previously produced to-codebase so they can be undone.
        """
        return self._with_option(
            REFERENCE_TARGET_CODEBASE, str(reference_target_codebase)
        )

    def with_reference_from_codebase(
        self, reference_from_codebase: AbstractExpression
    ) -> TranslateExpression:
        """Return this translation with the given reference from-codebase.

        Merging uses it as the baseline onto which the input codebase and the
        reference to-codebase changes are both applied.
        """
        return self._with_option(REFERENCE_FROM_CODEBASE, str(reference_from_codebase))

    def _with_option(self, key: str, value: str) -> TranslateExpression:
        logger.debug("Setting %s=%s on %s", key, value, self)
        return TranslateExpression(
            to_translate=self.to_translate,
            operation=Operation.create(
                self.operation.operator, self.operation.term.with_option(key, value)
            ),
        )

    def __str__(self) -> str:
        return f"{self.to_translate}{self.operation}"


class EditExpression(AbstractExpression):
    """An editor run over a child expression's codebase, e.g. `myRepo|renamer{}`."""

    kind: Literal["edit"] = "edit"
    to_edit: Expression
    operation: Operation

    @model_validator(mode="after")
    def operator_is_edit(self) -> EditExpression:
        if self.operation.operator is not Operator.EDIT:
            raise ConfigurationError(
                f"EditExpression requires an {Operator.EDIT.name} "
                f"operation, got {self.operation.operator.name} ({self.operation})"
            )
        return self

    def with_option(self, key: str, value: str) -> EditExpression:
        return EditExpression(
            to_edit=self.to_edit,
            operation=Operation.create(
                self.operation.operator, self.operation.term.with_option(key, value)
            ),
        )

    def __str__(self) -> str:
        return f"{self.to_edit}{self.operation}"


Expression = Annotated[
    Union[RepositoryExpression, TranslateExpression, EditExpression],
    Field(discriminator="kind"),
]

TranslateExpression.model_rebuild()
EditExpression.model_rebuild()
