"""Tests for plugin discovery."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from venvlint.plugins.discovery import (
    LINTER_ENTRY_POINT_GROUP,
    discover_plugins,
)
from venvlint.plugins.linters.base import BaseLinter
from venvlint.plugins.linters.ruff import Ruff


def make_entry_point(name: str, loaded=None, error: Exception | None = None) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = loaded
    return ep


class TestDiscoverPlugins:
    """Tests for discover_plugins."""

    def test_group_name(self) -> None:
        assert LINTER_ENTRY_POINT_GROUP == "venvlint.linters"

    def test_loads_entry_points(self) -> None:
        """Test entry points are loaded by name."""
        with patch(
            "venvlint.plugins.discovery.entry_points",
            return_value=[make_entry_point("ruff", Ruff)],
        ) as mock_eps:
            plugins = discover_plugins(LINTER_ENTRY_POINT_GROUP, BaseLinter)

        mock_eps.assert_called_once_with(group=LINTER_ENTRY_POINT_GROUP)
        assert plugins == {"ruff": Ruff}

    def test_skips_wrong_base_class(self) -> None:
        """Test classes not deriving from the base are skipped."""
        with patch(
            "venvlint.plugins.discovery.entry_points",
            return_value=[make_entry_point("bogus", dict), make_entry_point("ruff", Ruff)],
        ):
            plugins = discover_plugins(LINTER_ENTRY_POINT_GROUP, BaseLinter)

        assert list(plugins) == ["ruff"]

    def test_skips_non_class(self) -> None:
        with patch(
            "venvlint.plugins.discovery.entry_points",
            return_value=[make_entry_point("func", len)],
        ):
            assert discover_plugins(LINTER_ENTRY_POINT_GROUP, BaseLinter) == {}

    def test_load_failure_is_skipped(self) -> None:
        """Test a broken plugin does not break discovery."""
        with patch(
            "venvlint.plugins.discovery.entry_points",
            return_value=[
                make_entry_point("broken", error=ImportError("no module")),
                make_entry_point("ruff", Ruff),
            ],
        ):
            plugins = discover_plugins(LINTER_ENTRY_POINT_GROUP, BaseLinter)

        assert plugins == {"ruff": Ruff}
