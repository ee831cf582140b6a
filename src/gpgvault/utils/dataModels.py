from dataclasses import dataclass
from pathlib import Path

DEFAULT_VAULT_DIR = "~/.local/vault"
DEFAULT_EDITOR = "/usr/bin/vi"
DEFAULT_GPG = "gpg"

KEY_ID_FILE = ".keyid"
ENTRY_SUFFIX = ".gpg"

DEFAULT_PASSWORD_LENGTH = 20

DIR_MODE = 0o700
FILE_MODE = 0o600


@dataclass(frozen=True)
class VaultConfig:
    vault_root: Path
    editor: str
    scratch_root: Path
    gpg_binary: str = DEFAULT_GPG
