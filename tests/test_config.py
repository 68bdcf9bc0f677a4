"""Tests for the configuration module."""

import pytest

from log_retrieval.config import Config, _parse_bool, load_config, load_yaml_config

ENV_KEYS = ("CONFIG_PATH", "LOG_DIR", "SERVER_HOST", "SERVER_PORT", "LOG_LEVEL", "DEBUG")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestParseBool:
    def test_true_values(self):
        for val in ("true", "True", "1", "yes", " true ", True):
            assert _parse_bool(val)

    def test_false_values(self):
        for val in ("false", "0", "no", "", False):
            assert not _parse_bool(val)


class TestConfig:
    def test_defaults(self):
        cfg = Config()
        assert cfg.log_dir == "./logs"
        assert cfg.host == "0.0.0.0"
        assert cfg.port == 8000
        assert cfg.log_level == "INFO"
        assert cfg.debug is False

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Config().log_dir = "/tmp"

    def test_empty_log_dir_rejected(self):
        with pytest.raises(ValueError, match="log_dir"):
            Config(log_dir="  ")

    @pytest.mark.parametrize("port", [0, 70000, -1])
    def test_bad_port_rejected(self, port):
        with pytest.raises(ValueError, match="port"):
            Config(port=port)

    def test_bad_log_level_rejected(self):
        with pytest.raises(ValueError, match="log_level"):
            Config(log_level="LOUD")

    def test_log_level_normalized(self):
        assert Config(log_level="debug").log_level == "DEBUG"

    def test_from_dict_coerces_and_ignores_unknown(self):
        cfg = Config.from_dict({"port": "9001", "debug": "yes", "colour": "blue"})
        assert cfg.port == 9001
        assert cfg.debug is True


class TestLoadConfig:
    def test_defaults_without_file_or_env(self):
        assert load_config() == Config()

    def test_missing_yaml_uses_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "missing.yml")) == Config()

    def test_yaml_values(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("log_dir: /var/log/app\nport: 9100\n")
        cfg = load_config(str(path))
        assert cfg.log_dir == "/var/log/app"
        assert cfg.port == 9100

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yml"
        path.write_text("log_dir: /var/log/app\nport: 9100\n")
        monkeypatch.setenv("LOG_DIR", "/data/logs")
        monkeypatch.setenv("SERVER_PORT", "9200")
        monkeypatch.setenv("DEBUG", "true")
        cfg = load_config(str(path))
        assert cfg.log_dir == "/data/logs"
        assert cfg.port == 9200
        assert cfg.debug is True

    def test_config_path_env(self, tmp_path, monkeypatch):
        path = tmp_path / "other.yml"
        path.write_text("log_level: warning\n")
        monkeypatch.setenv("CONFIG_PATH", str(path))
        assert load_config().log_level == "WARNING"

    def test_explicit_path_beats_config_path_env(self, tmp_path, monkeypatch):
        env_file = tmp_path / "env.yml"
        env_file.write_text("log_level: warning\n")
        explicit = tmp_path / "explicit.yml"
        explicit.write_text("log_level: debug\n")
        monkeypatch.setenv("CONFIG_PATH", str(env_file))
        assert load_config(str(explicit)).log_level == "DEBUG"

    def test_non_mapping_yaml_rejected(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_yaml_config(str(path))

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_yaml_config(str(path)) == {}
