"""Core models, logging and process helpers shared by all venvlint modules."""
