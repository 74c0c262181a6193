"""Tests for configuration loading."""

from pathlib import Path

import pytest

from typeprune.config import (
    get_entrypoint_types,
    get_max_cycles,
    get_output_indent,
    load_config,
    should_check_documentation,
)
from typeprune.driver import DEFAULT_MAX_CYCLES
from typeprune.errors import ConfigurationError
from typeprune.paths import (
    ensure_typeprune_dir,
    get_config_path,
    get_pruned_path,
    get_results_path,
)


class TestConfigGetters:
    """Tests for reading values out of a config dict."""

    def test_defaults_for_empty_config(self):
        assert get_entrypoint_types({}) == []
        assert should_check_documentation({}) is False
        assert get_max_cycles({}) == DEFAULT_MAX_CYCLES
        assert get_output_indent({}) == 2

    def test_reads_values(self):
        config = {
            "entrypoint_types": ["com.acme.App"],
            "check_documentation": True,
            "max_cycles": 5,
            "output": {"indent": 4},
        }

        assert get_entrypoint_types(config) == ["com.acme.App"]
        assert should_check_documentation(config) is True
        assert get_max_cycles(config) == 5
        assert get_output_indent(config) == 4

    def test_entrypoints_must_be_a_list(self):
        """A bare string would otherwise be split into characters."""
        with pytest.raises(ConfigurationError):
            get_entrypoint_types({"entrypoint_types": "com.acme.App"})

    def test_entrypoints_must_be_strings(self):
        with pytest.raises(ConfigurationError):
            get_entrypoint_types({"entrypoint_types": ["com.acme.App", 3]})

    def test_output_must_be_an_object(self):
        with pytest.raises(ConfigurationError):
            get_output_indent({"output": 4})


class TestConfigFiles:
    """Tests for loading and saving config files."""

    def test_loads_object(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"entrypoint_types": ["a.A"], "max_cycles": 2}')

        assert load_config(path) == {"entrypoint_types": ["a.A"], "max_cycles": 2}

    def test_rejects_non_object(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("[]")

        with pytest.raises(ConfigurationError, match="must be a JSON object"):
            load_config(path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_config(path)


class TestPaths:
    """Tests for output path helpers."""

    def test_paths_live_in_typeprune_dir(self, tmp_path: Path):
        assert get_config_path(tmp_path) == tmp_path / ".typeprune" / "config.json"
        assert get_results_path(tmp_path) == tmp_path / ".typeprune" / "results.json"
        assert get_pruned_path(tmp_path) == tmp_path / ".typeprune" / "pruned.json"

    def test_ensure_creates_directory(self, tmp_path: Path):
        directory = ensure_typeprune_dir(tmp_path)

        assert directory.is_dir()
        assert ensure_typeprune_dir(tmp_path) == directory
