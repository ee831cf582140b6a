import os
import posixpath

from pathlib import Path
from typing import Dict

from gpgvault.utils.dataModels import ENTRY_SUFFIX, KEY_ID_FILE
from gpgvault.utils.errors import InvalidName


def vault_paths(vault_root: Path) -> Dict[str, Path]:
    return {
        "root": vault_root,
        "keyid": vault_root / KEY_ID_FILE,
    }


def resolve_entry_path(vault_root: Path, name: str) -> Path:
    """Map an entry name such as ``web/github`` to ``<vault_root>/web/github.gpg``.

    Purely lexical: nothing on disk is consulted, so it works for move targets
    that do not exist yet. Raises InvalidName for anything that could escape
    the vault root.
    """
    if not isinstance(name, str) or not name:
        raise InvalidName(str(name), "name is empty")
    if "\x00" in name:
        raise InvalidName(name, "name contains a null byte")
    if name.startswith("/") or os.path.isabs(name):
        raise InvalidName(name, "absolute paths are not allowed")

    for segment in name.split("/"):
        if segment == "":
            raise InvalidName(name, "empty path segment")
        if segment in (".", ".."):
            raise InvalidName(name, f"{segment!r} segments are not allowed")

    root = posixpath.normpath(os.path.abspath(vault_root))
    candidate = posixpath.normpath(posixpath.join(root, name + ENTRY_SUFFIX))

    # commonpath compares whole segments, so /vault-other is not inside /vault
    if candidate == root or posixpath.commonpath([root, candidate]) != root:
        raise InvalidName(name, "resolves outside the vault")
    return Path(candidate)
