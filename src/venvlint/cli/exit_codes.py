"""Exit codes for the venvlint CLI."""

EXIT_SUCCESS = 0
EXIT_ISSUES_FOUND = 1
EXIT_INVALID_USAGE = 2
