"""
Runtime Configuration Unit Tests
Tests for merkle_commit/config/runtime.py
"""
import pytest

from merkle_commit.config import runtime
from merkle_commit.config.runtime import (
    RuntimeConfig,
    get_default_config,
    load_config,
    set_default_config,
)
from merkle_commit.crypto.hashing import keccak256, sha256


class TestRuntimeConfig:
    """Tests for RuntimeConfig construction."""

    def test_defaults(self):
        """Defaults are keccak256, INFO, human output."""
        config = RuntimeConfig()
        assert config.hash_algorithm == "keccak256"
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.output_format == "human"
        assert config.hasher is keccak256

    def test_algorithm_lowercased(self):
        """Algorithm names are case-insensitive."""
        config = RuntimeConfig(hash_algorithm="SHA256")
        assert config.hash_algorithm == "sha256"
        assert config.hasher is sha256

    def test_unknown_algorithm(self):
        """Unknown hash algorithms fail at construction."""
        with pytest.raises(ValueError, match="md5"):
            RuntimeConfig(hash_algorithm="md5")

    def test_log_level_normalized(self):
        """Log level names are case-insensitive."""
        assert RuntimeConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        """Misspelled log levels fail at construction."""
        with pytest.raises(ValueError, match="log_level"):
            RuntimeConfig(log_level="DEBG")

    def test_unknown_output_format(self):
        """Only human and json are accepted."""
        with pytest.raises(ValueError, match="output_format"):
            RuntimeConfig(output_format="xml")

    def test_from_dict_partial(self):
        """Missing keys fall back to defaults."""
        config = RuntimeConfig.from_dict({"output_format": "json"})
        assert config.output_format == "json"
        assert config.hash_algorithm == "keccak256"

    def test_to_dict_round_trip(self):
        """from_dict(to_dict()) reproduces the config."""
        config = RuntimeConfig(
            hash_algorithm="sha256", log_level="DEBUG", extra={"note": "x"}
        )
        assert RuntimeConfig.from_dict(config.to_dict()) == config


class TestEnvironment:
    """Tests for environment variable overrides."""

    def test_from_env(self, clean_env):
        """MERKLE_* variables are read."""
        clean_env.setenv("MERKLE_HASH_ALGORITHM", "sha256")
        clean_env.setenv("MERKLE_OUTPUT_FORMAT", "JSON")
        config = RuntimeConfig.from_env()
        assert config.hash_algorithm == "sha256"
        assert config.output_format == "json"

    def test_from_env_defaults(self, clean_env):
        """With nothing set, from_env equals the defaults."""
        assert RuntimeConfig.from_env() == RuntimeConfig()

    def test_with_env_overrides(self, clean_env):
        """Env vars win over file values."""
        clean_env.setenv("MERKLE_LOG_LEVEL", "WARNING")
        base = RuntimeConfig(hash_algorithm="sha256", log_level="DEBUG")
        merged = base.with_env_overrides()
        assert merged.log_level == "WARNING"
        assert merged.hash_algorithm == "sha256"

    def test_bad_log_level_from_env(self, clean_env):
        """A typo in MERKLE_LOG_LEVEL is rejected, not silently ignored."""
        clean_env.setenv("MERKLE_LOG_LEVEL", "DEBG")
        with pytest.raises(ValueError, match="DEBG"):
            RuntimeConfig.from_env()

    def test_no_overrides_returns_self(self, clean_env):
        """Without env vars the same object comes back."""
        config = RuntimeConfig()
        assert config.with_env_overrides() is config


class TestYamlLoading:
    """Tests for from_yaml() and load_config()."""

    def test_from_yaml(self, tmp_path):
        """YAML keys map onto fields."""
        path = tmp_path / "merkle.yaml"
        path.write_text("hash_algorithm: sha256\nlog_level: DEBUG\n", encoding="utf-8")
        config = RuntimeConfig.from_yaml(path)
        assert config.hash_algorithm == "sha256"
        assert config.log_level == "DEBUG"

    def test_from_yaml_empty_file(self, tmp_path):
        """An empty file yields defaults."""
        path = tmp_path / "merkle.yaml"
        path.write_text("", encoding="utf-8")
        assert RuntimeConfig.from_yaml(path) == RuntimeConfig()

    def test_from_yaml_missing(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "absent.yaml")

    def test_load_config_picks_up_cwd_file(self, tmp_path, clean_env):
        """./merkle.yaml is used when no path is given."""
        (tmp_path / "merkle.yaml").write_text("output_format: json\n", encoding="utf-8")
        clean_env.chdir(tmp_path)
        assert load_config().output_format == "json"

    def test_load_config_without_file(self, tmp_path, clean_env):
        """No file and no env gives defaults."""
        clean_env.chdir(tmp_path)
        assert load_config() == RuntimeConfig()

    def test_load_config_env_over_file(self, tmp_path, clean_env):
        """Env overrides are applied after the file."""
        path = tmp_path / "custom.yaml"
        path.write_text("hash_algorithm: sha256\n", encoding="utf-8")
        clean_env.setenv("MERKLE_HASH_ALGORITHM", "keccak256")
        assert load_config(path).hash_algorithm == "keccak256"


class TestDefaultConfig:
    """Tests for the process-wide default config."""

    def test_set_and_get(self, monkeypatch):
        """set_default_config replaces the cached default."""
        monkeypatch.setattr(runtime, "_default_config", None)
        custom = RuntimeConfig(hash_algorithm="sha256")
        set_default_config(custom)
        assert get_default_config() is custom

    def test_lazy_from_env(self, monkeypatch, clean_env):
        """The first get reads the environment once."""
        monkeypatch.setattr(runtime, "_default_config", None)
        clean_env.setenv("MERKLE_OUTPUT_FORMAT", "json")
        first = get_default_config()
        assert first.output_format == "json"
        assert get_default_config() is first
