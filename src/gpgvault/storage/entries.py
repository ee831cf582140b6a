"""Entry lifecycle: create, get, edit, remove and move.

An entry is ``<vault_root>/<name>.gpg`` and is only ever written as a complete
envelope. Plaintext touches disk solely inside a TempWorkspace during edit.
"""
from __future__ import annotations

import logging
import os

from functools import partial
from pathlib import Path
from typing import Callable, List, Optional

from gpgvault.crypto.gpg import GpgGateway
from gpgvault.crypto.password import generate_password
from gpgvault.storage.scratch import TempWorkspace
from gpgvault.storage.vault import DestinationExists, ensure_parent, read_key_id
from gpgvault.ui.editor import run_editor
from gpgvault.utils.dataModels import DEFAULT_PASSWORD_LENGTH, VaultConfig
from gpgvault.utils.errors import (
    AlreadyExists,
    EditorFailed,
    EntryNotFound,
    InvalidConfirmation,
    MoveFailed,
    StorageError,
)
from gpgvault.utils.helper import resolve_entry_path

logger = logging.getLogger(__name__)

Editor = Callable[[Path], None]


def interpret_confirmation(answer: str) -> bool:
    """``y`` confirms; ``n``, ``N`` or nothing declines; anything else is invalid."""
    answer = answer.strip()
    if answer == "y":
        return True
    if answer in ("", "n", "N"):
        return False
    raise InvalidConfirmation(answer)


def _trim_newline(data: bytes) -> bytes:
    return data[:-1] if data.endswith(b"\n") else data


def _missing_parents(path: Path, root: Path) -> List[Path]:
    """Directories between ``root`` and ``path`` that do not exist yet, deepest first."""
    missing = []
    for parent in path.parents:
        if parent == root or parent.exists():
            break
        missing.append(parent)
    return missing


def _remove_empty(directories: List[Path]) -> None:
    for d in directories:
        try:
            d.rmdir()
        except OSError:
            break


class EntryStore:
    def __init__(
        self,
        vault_root: Path,
        key_id: str,
        gateway: GpgGateway,
        workspace: TempWorkspace,
        editor: Optional[Editor] = None,
    ):
        self.vault_root = vault_root
        self.key_id = key_id
        self.gateway = gateway
        self.workspace = workspace
        self.editor = editor

    def path_of(self, name: str) -> Path:
        return resolve_entry_path(self.vault_root, name)

    def exists(self, name: str) -> bool:
        return self.path_of(name).is_file()

    def _existing(self, name: str) -> Path:
        path = self.path_of(name)
        if not path.is_file():
            raise EntryNotFound(name)
        return path

    def create(self, name: str, plaintext: Optional[str] = None, length: int = DEFAULT_PASSWORD_LENGTH) -> str:
        """Encrypt a new entry and return its value, generating one if none is given.

        An existing entry is never overwritten.
        """
        path = self.path_of(name)
        if path.exists():
            raise AlreadyExists(name)
        if not plaintext:
            plaintext = generate_password(length)
        try:
            self.gateway.encrypt(plaintext.encode("utf-8"), self.key_id, path, exclusive=True)
        except DestinationExists:
            raise AlreadyExists(name) from None
        except OSError as exc:
            raise StorageError(name, "create", exc) from exc
        logger.debug("created %s", name)
        return plaintext

    def get(self, name: str) -> bytes:
        return self.gateway.decrypt(self._existing(name))

    def edit(self, name: str, editor: Optional[Editor] = None) -> bool:
        """Decrypt to scratch, run the editor, re-encrypt over the entry.

        Returns False when the edited content equals the original, in which
        case the envelope is left as it was.
        """
        path = self._existing(name)
        edit = editor or self.editor
        if edit is None:
            raise ValueError("no editor available")

        def body(scratch: Path) -> bool:
            original = self.gateway.decrypt(path)
            try:
                scratch.write_bytes(original)
            except OSError as exc:
                raise StorageError(name, "prepare a scratch copy of", exc) from exc
            edit(scratch)
            try:
                updated = _trim_newline(scratch.read_bytes())
            except OSError as exc:
                # some editors replace or delete the file they were given
                raise EditorFailed(None, f"cannot read back {scratch.name}: {exc.strerror or exc}") from exc
            if updated == original:
                return False
            try:
                self.gateway.encrypt(updated, self.key_id, path)
            except OSError as exc:
                raise StorageError(name, "update", exc) from exc
            return True

        changed = self.workspace.with_scratch_file(name, body)
        logger.debug("edited %s (changed=%s)", name, changed)
        return changed

    def remove(self, name: str, answer: str) -> bool:
        """Delete an entry after confirmation. Returns False if declined."""
        path = self.path_of(name)
        if not interpret_confirmation(answer):
            return False
        if not path.is_file():
            raise EntryNotFound(name)
        try:
            path.unlink()
        except OSError as exc:
            raise StorageError(name, "remove", exc) from exc
        logger.debug("removed %s", name)
        return True

    def move(self, source: str, target: str) -> Path:
        src = self._existing(source)
        dst = self.path_of(target)
        # os.rename would silently replace an existing target on POSIX
        if dst.exists():
            raise MoveFailed(source, target, "target already exists")
        created = _missing_parents(dst, self.vault_root)
        try:
            ensure_parent(dst)
            os.rename(src, dst)
        except OSError as exc:
            _remove_empty(created)
            raise MoveFailed(source, target, exc.strerror or str(exc)) from exc
        logger.debug("moved %s -> %s", source, target)
        return dst


def open_store(config: VaultConfig) -> EntryStore:
    """Read the vault identity once and wire an EntryStore for this invocation."""
    key_id = read_key_id(config.vault_root)
    return EntryStore(
        config.vault_root,
        key_id,
        GpgGateway(config.gpg_binary),
        TempWorkspace(config.scratch_root),
        editor=partial(run_editor, config.editor),
    )
