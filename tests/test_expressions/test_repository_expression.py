"""Tests for RepositoryExpression leaves."""

import pytest
from pydantic import ValidationError

from codebase_expressions.expressions import RepositoryExpression, Term


class TestRepositoryExpression:
    """Tests for repository leaf construction and rendering."""

    def test_bare_name(self, my_repo):
        assert str(my_repo) == "myRepo"
        assert my_repo.repository_name == "myRepo"

    def test_at_revision(self, my_repo):
        assert str(my_repo.at_revision("1234")) == "myRepo{revision=1234}"
        assert my_repo.at_revision("1234").option("revision") == "1234"

    def test_at_revision_pure(self, my_repo):
        my_repo.at_revision("1234")
        assert str(my_repo) == "myRepo"

    def test_create_with_options(self):
        repo = RepositoryExpression.create("myRepo", {"branch": "main"})
        assert str(repo) == "myRepo{branch=main}"

    def test_with_option_overwrites(self, my_repo):
        repo = my_repo.with_option("branch", "main").with_option("branch", "dev")
        assert repo.term == Term(name="myRepo", options={"branch": "dev"})

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            RepositoryExpression.create("")

    def test_equality_by_content(self):
        assert RepositoryExpression.create("a") == RepositoryExpression.create("a")
        assert RepositoryExpression.create("a") != RepositoryExpression.create("b")

    def test_kind_tag(self, my_repo):
        assert my_repo.kind == "repository"

    def test_json_roundtrip(self, my_repo):
        original = my_repo.at_revision("7")
        restored = RepositoryExpression.model_validate_json(original.model_dump_json())
        assert restored == original
