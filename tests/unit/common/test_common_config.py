"""Tests for common.config module."""

import pytest

from common.config import ConfigSingleton, find_config_path, load_yaml


class TestFindConfigPath:
    def test_named_config(self, tmp_path) -> None:
        (tmp_path / "prod.yaml").write_text("a: 1\n")
        assert find_config_path("prod", tmp_path) == tmp_path / "prod.yaml"

    def test_default_name(self, tmp_path) -> None:
        (tmp_path / "prod.yaml").write_text("a: 1\n")
        assert find_config_path(None, tmp_path) == tmp_path / "prod.yaml"

    def test_env_var(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "test.yaml").write_text("a: 1\n")
        monkeypatch.setenv("MY_CONFIG", "test")
        assert find_config_path(None, tmp_path, env_var="MY_CONFIG") == tmp_path / "test.yaml"

    def test_explicit_path(self, tmp_path) -> None:
        path = tmp_path / "custom.yml"
        path.write_text("a: 1\n")
        assert find_config_path(str(path), tmp_path / "unused") == path

    def test_missing_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            find_config_path("missing", tmp_path)


class TestLoadYaml:
    def test_parses_mapping(self, tmp_path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("threshold: 0.2\ntargets:\n  a: 1\n")
        assert load_yaml(path) == {"threshold": 0.2, "targets": {"a": 1}}

    def test_empty_file_returns_empty_dict(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}


class TestConfigSingleton:
    def test_lazy_load_is_cached(self) -> None:
        calls = []

        def loader():
            calls.append(1)
            return {"value": 1}

        manager = ConfigSingleton(loader)
        assert manager.get() is manager.get()
        assert len(calls) == 1

    def test_set_and_reset(self) -> None:
        manager = ConfigSingleton(lambda: "loaded")
        manager.set("override")
        assert manager.get() == "override"
        manager.reset()
        assert manager.get() == "loaded"

    def test_no_loader_raises(self) -> None:
        with pytest.raises(RuntimeError):
            ConfigSingleton().get()
