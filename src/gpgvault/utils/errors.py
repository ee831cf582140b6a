"""Error kinds raised by the vault core.

Everything derives from VaultError so the entry point can map any failure to a
message and an exit status in one place.
"""
from __future__ import annotations

from pathlib import Path


class VaultError(Exception):
    exit_code = 1


class InvalidName(VaultError):
    def __init__(self, name: str, reason: str):
        super().__init__(f"invalid entry name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class VaultNotInitialized(VaultError):
    def __init__(self, vault_root: Path):
        super().__init__(
            f"vault at {vault_root} is not initialised. Run `vault init <key-id>` first."
        )
        self.vault_root = vault_root


class VaultAlreadyInitialized(VaultError):
    def __init__(self, key_id: str):
        super().__init__(f"vault already initialised for {key_id}")
        self.key_id = key_id


class AlreadyExists(VaultError):
    def __init__(self, name: str):
        super().__init__(f"{name} is already registered")
        self.name = name


class EntryNotFound(VaultError):
    def __init__(self, name: str):
        super().__init__(f"no such entry: {name}")
        self.name = name


class BackendError(VaultError):
    """Failure reported by the external encryption backend."""

    action = "backend call"

    def __init__(self, path: Path, diagnostics: str = ""):
        msg = f"{self.action} failed for {path}"
        if diagnostics:
            msg += f": {diagnostics.strip()}"
        super().__init__(msg)
        self.path = path
        self.diagnostics = diagnostics


class EncryptionFailed(BackendError):
    action = "encryption"


class DecryptionFailed(BackendError):
    action = "decryption"


class MoveFailed(VaultError):
    def __init__(self, source: str, target: str, reason: str):
        super().__init__(f"cannot move {source} to {target}: {reason}")
        self.source = source
        self.target = target


class CleanupFailed(VaultError):
    """Scratch plaintext could not be removed. Reported, never fatal on its own."""

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"failed to remove scratch file {path}: {cause}")
        self.path = path
        self.cause = cause


class InvalidConfirmation(VaultError):
    def __init__(self, answer: str):
        super().__init__(f"invalid input: {answer!r} (expected y or n)")
        self.answer = answer


class EditorFailed(VaultError):
    def __init__(self, editor: str | None, reason: str):
        if editor:
            super().__init__(f"editor {editor!r} failed: {reason}")
        else:
            super().__init__(f"editor failed: {reason}")
        self.editor = editor


class StorageError(VaultError):
    """A filesystem operation on an entry failed."""

    def __init__(self, name: str, action: str, cause: OSError):
        super().__init__(f"cannot {action} {name}: {cause.strerror or cause}")
        self.name = name
        self.cause = cause


class ClipboardUnavailable(VaultError):
    pass
