"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

from tinyscript.cli import build_parser, load_config, main, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[dump]\ntokens = true\n")
        result = load_config(cfg, tmp_path)
        assert result["dump"] == {"tokens": True}

    def test_auto_discover_tinyscript_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "tinyscript.toml"
        cfg.write_text("[dump]\nindent = 4\n")
        result = load_config(None, tmp_path)
        assert result["dump"] == {"indent": 4}


class TestConfigMerge:
    def _resolve(self, tmp_path: Path, *extra: str):
        src = tmp_path / "prog.tiny"
        src.write_text("")
        return resolve_options(build_parser().parse_args([str(src), *extra]))

    def test_config_values_used(self, tmp_path: Path) -> None:
        (tmp_path / "tinyscript.toml").write_text("[dump]\ntokens = true\ntrivia = true\nindent = 4\n")
        opts = self._resolve(tmp_path)
        assert opts.show_tokens is True
        assert opts.show_trivia is True
        assert opts.indent == 4

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "tinyscript.toml").write_text("[dump]\nindent = 4\n")
        opts = self._resolve(tmp_path, "--indent", "8")
        assert opts.indent == 8

    def test_wrong_types_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "tinyscript.toml").write_text('[dump]\ntokens = "yes"\nindent = true\n')
        opts = self._resolve(tmp_path)
        assert opts.show_tokens is False
        assert opts.indent == 2

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text("[dump]\ntokens = true\n")
        opts = self._resolve(tmp_path, "--config", str(cfg))
        assert opts.show_tokens is True

    def test_invalid_toml_exit_2(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "tinyscript.toml").write_text("[dump\n")
        src = tmp_path / "prog.tiny"
        src.write_text("x\n")
        assert main([str(src)]) == 2
        assert "error:" in capsys.readouterr().err
