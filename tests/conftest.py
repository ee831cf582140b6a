"""Shared fixtures: a fake gpg executable and an initialised vault."""

import stat
import sys
import textwrap
from pathlib import Path

import pytest

from gpgvault.storage.entries import open_store
from gpgvault.storage.vault import init_vault
from gpgvault.utils.dataModels import VaultConfig

KEY_ID = "vault-test@example.invalid"

FAKE_GPG = textwrap.dedent(
    """\
    #!{python}
    # Mimics the gpg command lines used by the gateway. Envelopes are
    # MAGIC + recipient + newline + base64(plaintext).
    import base64
    import sys

    MAGIC = b"FAKEGPG\\n"
    args = sys.argv[1:]

    if "--encrypt" in args:
        recipient = args[args.index("--recipient") + 1]
        if recipient == "missing-key":
            sys.stderr.write("gpg: missing-key: skipped: No public key\\n")
            sys.exit(2)
        data = sys.stdin.buffer.read()
        sys.stdout.buffer.write(MAGIC + recipient.encode() + b"\\n" + base64.b64encode(data))
    elif "--decrypt" in args:
        with open(args[-1], "rb") as f:
            blob = f.read()
        if not blob.startswith(MAGIC):
            sys.stderr.write("gpg: no valid OpenPGP data found.\\n")
            sys.exit(2)
        _, _, body = blob[len(MAGIC):].partition(b"\\n")
        sys.stdout.buffer.write(base64.b64decode(body))
    else:
        sys.exit(2)
    """
)


def write_script(path: Path, source: str) -> str:
    path.write_text(source.format(python=sys.executable))
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return str(path)


@pytest.fixture
def fake_gpg(tmp_path: Path) -> str:
    return write_script(tmp_path / "fake-gpg", FAKE_GPG)


@pytest.fixture
def vault_root(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    init_vault(root, KEY_ID)
    return root


@pytest.fixture
def scratch_root(tmp_path: Path) -> Path:
    return tmp_path / "scratch"


@pytest.fixture
def config(vault_root: Path, scratch_root: Path, fake_gpg: str) -> VaultConfig:
    return VaultConfig(vault_root=vault_root, editor="true", scratch_root=scratch_root, gpg_binary=fake_gpg)


@pytest.fixture
def store(config: VaultConfig):
    return open_store(config)
