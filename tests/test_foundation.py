"""Foundation tests: package imports, repo structure, subpackage layout."""

from pathlib import Path


# ── Import tests ─────────────────────────────────────────────────────────────

class TestImports:
    """Verify all package imports work."""

    def test_import_codebase_expressions(self):
        import codebase_expressions
        assert hasattr(codebase_expressions, "__version__")

    def test_version_string(self):
        import codebase_expressions
        assert codebase_expressions.__version__ == "0.1.0"

    def test_import_expressions(self):
        import codebase_expressions.expressions

    def test_import_request(self):
        import codebase_expressions.request

    def test_import_errors(self):
        from codebase_expressions.errors import ConfigurationError
        assert issubclass(ConfigurationError, Exception)


# ── Repo structure tests ────────────────────────────────────────────────────

class TestRepoStructure:
    """Verify expected repo structure exists."""

    def test_readme_exists(self, repo_root: Path):
        assert (repo_root / "README.md").is_file()

    def test_pyproject_exists(self, repo_root: Path):
        assert (repo_root / "pyproject.toml").is_file()

    def test_scripts_dir_exists(self, repo_root: Path):
        assert (repo_root / "scripts").is_dir()

    def test_expressions_init(self, package_root: Path):
        assert (package_root / "expressions" / "__init__.py").is_file()

    def test_request_init(self, package_root: Path):
        assert (package_root / "request" / "__init__.py").is_file()
