"""Builds the one VaultConfig used for a whole invocation.

This is the only module that looks at the process environment; everything else
receives the resulting config explicitly.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Mapping

from gpgvault.utils.dataModels import DEFAULT_EDITOR, DEFAULT_GPG, DEFAULT_VAULT_DIR, VaultConfig


def _absolute(path: str) -> Path:
    return Path(os.path.abspath(os.path.expanduser(path)))


def load_config(environ: Mapping[str, str] | None = None, vault_dir: str | None = None) -> VaultConfig:
    env = os.environ if environ is None else environ

    root = vault_dir or env.get("VAULT_DIR") or env.get("VAULT_PATH") or DEFAULT_VAULT_DIR
    editor = env.get("VISUAL") or env.get("EDITOR") or DEFAULT_EDITOR
    scratch = env.get("VAULT_SCRATCH_DIR") or tempfile.gettempdir()

    return VaultConfig(
        vault_root=_absolute(root),
        editor=editor,
        scratch_root=_absolute(scratch),
        gpg_binary=env.get("VAULT_GPG") or DEFAULT_GPG,
    )
