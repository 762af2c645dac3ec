"""codebase-expressions: immutable expression trees describing codebase transformations."""

__version__ = "0.1.0"
