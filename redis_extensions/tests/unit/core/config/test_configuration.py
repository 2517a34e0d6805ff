"""
Unit tests for the hierarchical configuration source.
"""

import json
from pathlib import Path

import pytest

from redis_extensions.core.config.configuration import Configuration
from redis_extensions.core.exceptions import ConfigurationError


class TestSections:
    """Tests for section lookup."""

    def test_get_section_is_case_insensitive(self, redis_configuration: Configuration) -> None:
        section = redis_configuration.get_section("redis")

        assert section["connectionstring"] == "redis://localhost:6379"
        assert section.path == "Redis"

    def test_nested_path_uses_colon_separator(self) -> None:
        config = Configuration({"App": {"Cache": {"Redis": {"DbNumber": 2}}}})

        section = config.get_section("App:Cache:Redis")

        assert section["DbNumber"] == 2
        assert section.path == "App:Cache:Redis"

    def test_missing_section_is_empty_not_none(self, redis_configuration: Configuration) -> None:
        section = redis_configuration.get_section("Missing:Section")

        assert section is not None
        assert not section.exists()
        assert len(section) == 0

    def test_scalar_is_not_a_section(self, redis_configuration: Configuration) -> None:
        assert not redis_configuration.get_section("Redis:DbNumber").exists()

    def test_getitem_returns_sections_for_mappings(self, redis_configuration: Configuration) -> None:
        assert isinstance(redis_configuration["Redis"], Configuration)

    def test_missing_key_raises_key_error(self, redis_configuration: Configuration) -> None:
        with pytest.raises(KeyError):
            redis_configuration["Nope"]

    def test_get_default(self, redis_configuration: Configuration) -> None:
        assert redis_configuration.get_section("Redis").get("Password", "none") == "none"


class TestSources:
    """Tests for loading from files and the environment."""

    def test_from_json_file(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "appsettings.json"
        settings_file.write_text(
            json.dumps({"Redis": {"ConnectionString": "cache:6379", "DbNumber": 1}}),
            encoding="utf-8",
        )

        config = Configuration.from_json_file(settings_file)

        assert config.get_section("Redis").to_dict() == {
            "ConnectionString": "cache:6379",
            "DbNumber": 1,
        }

    def test_from_json_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            Configuration.from_json_file(tmp_path / "absent.json")

    def test_from_json_file_invalid(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "appsettings.json"
        settings_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not valid JSON"):
            Configuration.from_json_file(settings_file)

    def test_from_json_file_requires_object(self, tmp_path: Path) -> None:
        settings_file = tmp_path / "appsettings.json"
        settings_file.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="JSON object"):
            Configuration.from_json_file(settings_file)

    def test_from_env_splits_on_separator(self) -> None:
        environ = {
            "REDIS__CONNECTIONSTRING": "redis://cache:6379",
            "REDIS__DBNUMBER": "4",
            "PATH": "/usr/bin",
        }

        config = Configuration.from_env(environ=environ)

        section = config.get_section("Redis")
        assert section["ConnectionString"] == "redis://cache:6379"
        assert section["DbNumber"] == "4"

    def test_from_env_with_prefix(self) -> None:
        environ = {
            "MYAPP__REDIS__DBNUMBER": "2",
            "OTHER__REDIS__DBNUMBER": "9",
        }

        config = Configuration.from_env(prefix="MYAPP__", environ=environ)

        assert config.get_section("Redis")["DbNumber"] == "2"
        assert list(config) == ["REDIS"]

    @pytest.mark.parametrize(
        "names",
        [["REDIS", "REDIS__DBNUMBER"], ["REDIS__DBNUMBER", "REDIS"]],
    )
    def test_from_env_section_wins_over_scalar_in_any_order(self, names: list[str]) -> None:
        values = {"REDIS": "scalar", "REDIS__DBNUMBER": "4"}
        environ = {name: values[name] for name in names}

        config = Configuration.from_env(environ=environ)

        assert config.to_dict() == {"REDIS": {"DBNUMBER": "4"}}

    def test_merge_overrides_key_by_key(self) -> None:
        file_config = Configuration(
            {"Redis": {"ConnectionString": "file:6379", "DbNumber": 1}}
        )
        env_config = Configuration({"REDIS": {"DBNUMBER": "5"}})

        merged = Configuration.merge(file_config, env_config)

        section = merged.get_section("Redis")
        assert section["ConnectionString"] == "file:6379"
        assert section["DbNumber"] == "5"
