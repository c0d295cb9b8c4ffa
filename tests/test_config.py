"""
Configuration tests: defaults, YAML file, environment overrides.
"""

import pytest

from bfi.brainfuck import EofPolicy
from bfi.config import ConfigError, InterpreterConfig, load_config


class TestDefaults:

    def test_defaults(self):
        cfg = load_config(environ={})
        assert cfg == InterpreterConfig()
        assert cfg.tape_size == 30000
        assert cfg.eof_policy is EofPolicy.UNCHANGED
        assert cfg.max_source_bytes == 1 << 20

    def test_updated_skips_none(self):
        cfg = InterpreterConfig().updated(tape_size=None, eof_policy="zero")
        assert cfg.tape_size == 30000
        assert cfg.eof_policy is EofPolicy.ZERO


class TestYamlFile:

    def test_values_from_file(self, tmp_path):
        path = tmp_path / "bfi.yaml"
        path.write_text("tape_size: 100\neof_policy: max\n")
        cfg = load_config(str(path), environ={})
        assert cfg.tape_size == 100
        assert cfg.eof_policy is EofPolicy.MAX
        assert cfg.max_source_bytes == 1 << 20

    def test_empty_file(self, tmp_path):
        path = tmp_path / "bfi.yaml"
        path.write_text("")
        assert load_config(str(path), environ={}) == InterpreterConfig()

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "bfi.yaml"
        path.write_text("cell_width: 16\n")
        with pytest.raises(ConfigError, match="cell_width"):
            load_config(str(path), environ={})

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "bfi.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            load_config(str(path), environ={})


class TestEnvironment:

    def test_env_overrides_file(self, tmp_path):
        path = tmp_path / "bfi.yaml"
        path.write_text("tape_size: 100\n")
        cfg = load_config(str(path), environ={"BFI_TAPE_SIZE": "8", "BFI_EOF_POLICY": "ZERO"})
        assert cfg.tape_size == 8
        assert cfg.eof_policy is EofPolicy.ZERO

    def test_empty_variable_is_ignored(self):
        cfg = load_config(environ={"BFI_MAX_SOURCE_BYTES": ""})
        assert cfg.max_source_bytes == 1 << 20

    @pytest.mark.parametrize("env", [
        {"BFI_TAPE_SIZE": "lots"},
        {"BFI_TAPE_SIZE": "0"},
        {"BFI_EOF_POLICY": "-1"},
    ])
    def test_bad_values(self, env):
        with pytest.raises(ConfigError):
            load_config(environ=env)

    def test_process_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BFI_TAPE_SIZE", "42")
        assert load_config().tape_size == 42
