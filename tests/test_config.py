"""Tests for configuration loading."""

from pathlib import Path

from gpgvault.utils.config import load_config


class TestLoadConfig:
    def test_defaults(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("TMPDIR", str(tmp_path / "tmp"))
        cfg = load_config({})
        assert cfg.vault_root == tmp_path / ".local" / "vault"
        assert cfg.editor == "/usr/bin/vi"
        assert cfg.gpg_binary == "gpg"
        assert cfg.scratch_root.is_absolute()

    def test_vault_dir_env(self, tmp_path: Path):
        cfg = load_config({"VAULT_DIR": str(tmp_path / "v")})
        assert cfg.vault_root == tmp_path / "v"

    def test_legacy_vault_path_env(self, tmp_path: Path):
        cfg = load_config({"VAULT_PATH": str(tmp_path / "legacy")})
        assert cfg.vault_root == tmp_path / "legacy"

    def test_vault_dir_wins_over_legacy(self, tmp_path: Path):
        cfg = load_config({"VAULT_DIR": str(tmp_path / "a"), "VAULT_PATH": str(tmp_path / "b")})
        assert cfg.vault_root == tmp_path / "a"

    def test_explicit_vault_dir_wins(self, tmp_path: Path):
        cfg = load_config({"VAULT_DIR": str(tmp_path / "env")}, vault_dir=str(tmp_path / "flag"))
        assert cfg.vault_root == tmp_path / "flag"

    def test_relative_vault_dir_made_absolute(self, monkeypatch, tmp_path: Path):
        monkeypatch.chdir(tmp_path)
        cfg = load_config({"VAULT_DIR": "rel/vault"})
        assert cfg.vault_root == tmp_path / "rel" / "vault"

    def test_editor_precedence(self):
        assert load_config({"EDITOR": "nano"}).editor == "nano"
        assert load_config({"EDITOR": "nano", "VISUAL": "code -w"}).editor == "code -w"

    def test_scratch_and_gpg(self, tmp_path: Path):
        cfg = load_config({"VAULT_SCRATCH_DIR": str(tmp_path / "s"), "VAULT_GPG": "gpg2"})
        assert cfg.scratch_root == tmp_path / "s"
        assert cfg.gpg_binary == "gpg2"
