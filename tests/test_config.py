"""Unit tests for the configuration store."""

import threading

from larajinja import defaults
from larajinja.support import Config, merge_config


class TestMergeConfig:
    """Recursive configuration merging."""

    def test_nested_mappings_merge(self) -> None:
        merged = merge_config({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}, "b": 4})

        assert merged == {"a": {"x": 1, "y": 3}, "b": 4}

    def test_lists_are_concatenated_without_duplicates(self) -> None:
        merged = merge_config({"items": ["a", "b"]}, {"items": ["b", "c"]})

        assert merged == {"items": ["a", "b", "c"]}

    def test_scalars_replace(self) -> None:
        assert merge_config({"a": [1]}, {"a": None}) == {"a": None}

    def test_inputs_are_not_modified(self) -> None:
        base = {"a": {"x": [1]}}
        override = {"a": {"x": [2]}}

        merge_config(base, override)

        assert base == {"a": {"x": [1]}}
        assert override == {"a": {"x": [2]}}


class TestConfig:
    """Dot notation access."""

    def test_get(self) -> None:
        config = Config({"larajinja": {"suffix": "j2"}})

        assert config.get("larajinja.suffix") == "j2"
        assert config.get("larajinja.missing", "default") == "default"
        assert config.get("larajinja.suffix.deeper") is None
        assert config["larajinja"] == {"suffix": "j2"}

    def test_set_creates_sections(self) -> None:
        config = Config()
        config.set("larajinja.environment.autoescape", True)

        assert config.get("larajinja.environment") == {"autoescape": True}
        assert "larajinja.environment.autoescape" in config

    def test_has_counts_falsy_values(self) -> None:
        config = Config({"a": {"b": None}})

        assert config.has("a.b")
        assert not config.has("a.c")

    def test_merge_and_merge_defaults(self) -> None:
        config = Config({"suffix": "html", "stack": ["app"]})

        config.merge_defaults({"suffix": "j2", "stack": ["vendor"], "priority": 100})
        assert config.all() == {"suffix": "html", "stack": ["vendor", "app"], "priority": 100}

        config.merge({"suffix": "jinja"})
        assert config.get("suffix") == "jinja"

    def test_data_is_copied(self) -> None:
        data = {"a": {"b": 1}}
        config = Config(data)
        config.set("a.b", 2)

        assert data == {"a": {"b": 1}}
        config.all()["a"]["b"] = 3
        assert config.get("a.b") == 2

    def test_leaf_values_are_shared_not_copied(self) -> None:
        lock = threading.Lock()
        helper = object()
        config = Config({"view_helpers": {"services": {"money": helper}}, "lock": lock})

        config.merge({"extra": [helper]})

        assert config.get("view_helpers.services.money") is helper
        assert config.get("lock") is lock
        assert config.get("extra")[0] is helper
        assert merge_config({}, {"a": {"b": helper}})["a"]["b"] is helper

    def test_from_module(self) -> None:
        config = Config.from_module(defaults.__name__)

        assert config.get("module_name") == "larajinja"
        assert config.get("default_template_suffix") == "j2"
        assert not config.has("__name__")
