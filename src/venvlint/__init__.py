"""venvlint - Python linter adapters and interpreter resolution for editor hosts."""

__version__ = "0.1.0"
