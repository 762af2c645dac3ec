"""Shared fixtures for the codebase-expressions test suite."""

from pathlib import Path

import pytest


# ── Path fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def repo_root() -> Path:
    """Root of the codebase-expressions repo."""
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def package_root(repo_root: Path) -> Path:
    """Root of the codebase_expressions Python package."""
    return repo_root / "codebase_expressions"


@pytest.fixture
def tmp_request_dir(tmp_path: Path) -> Path:
    """Temporary directory for request documents."""
    d = tmp_path / "requests"
    d.mkdir()
    return d


# ── Expression fixtures ──────────────────────────────────────────────────────

@pytest.fixture
def my_repo():
    """Repository leaf for `myRepo`."""
    from codebase_expressions.expressions import RepositoryExpression

    return RepositoryExpression.create("myRepo")


@pytest.fixture
def public_translation(my_repo):
    """`myRepo>public{}` built from an explicit Operation."""
    from codebase_expressions.expressions import (
        Operation,
        Operator,
        Term,
        TranslateExpression,
    )

    return TranslateExpression(
        to_translate=my_repo,
        operation=Operation.create(Operator.TRANSLATE, Term(name="public")),
    )


# ── Request document fixtures ────────────────────────────────────────────────

@pytest.fixture
def sample_request_yaml() -> str:
    """Request translating myRepo to public with both reference codebases."""
    return """\
repository: myRepo
revision: 1234
steps:
  - translate: public
reference_target:
  repository: refTo
reference_from:
  repository: refFrom
"""


@pytest.fixture
def sample_edit_request_yaml() -> str:
    """Request running an editor between two translations."""
    return """\
repository: internalRepo
steps:
  - translate: public
  - edit: renamer
    options:
      regex: true
      depth: 2
  - translate: opensource
"""
