import logging
import os
import tempfile

from pathlib import Path
from typing import BinaryIO, Iterator
from contextlib import contextmanager

from gpgvault.utils.dataModels import DIR_MODE, FILE_MODE
from gpgvault.utils.errors import VaultAlreadyInitialized, VaultError, VaultNotInitialized
from gpgvault.utils.helper import vault_paths

logger = logging.getLogger(__name__)


def init_vault(vault_root: Path, key_id: str) -> Path:
    """Create the vault root and write the identity marker. Returns the marker path."""
    key_id = key_id.strip()
    if not key_id:
        raise VaultError("key id must not be empty")

    p = vault_paths(vault_root)
    if p["keyid"].exists():
        raise VaultAlreadyInitialized(p["keyid"].read_text(encoding="utf-8").strip())

    vault_root.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    fd = os.open(p["keyid"], os.O_WRONLY | os.O_CREAT | os.O_EXCL, FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(key_id)
    logger.debug("initialised vault at %s for %s", vault_root, key_id)
    return p["keyid"]


def read_key_id(vault_root: Path) -> str:
    marker = vault_paths(vault_root)["keyid"]
    try:
        key_id = marker.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise VaultNotInitialized(vault_root) from None
    if not key_id:
        raise VaultNotInitialized(vault_root)
    return key_id


class DestinationExists(FileExistsError):
    """Raised by an exclusive publish when the destination is already there."""


def ensure_parent(path: Path) -> None:
    path.parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)


@contextmanager
def atomic_output(destination: Path, *, exclusive: bool = False) -> Iterator[BinaryIO]:
    """Yield a 0600 file next to ``destination`` and move it into place on success.

    The temporary is created with O_EXCL and owner-only bits before anything is
    written through it. If the block raises, the temporary is removed and
    ``destination`` is untouched. With ``exclusive`` the final step refuses to
    replace an existing destination and raises DestinationExists.
    """
    ensure_parent(destination)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent)
    tmp = Path(tmp_name)
    try:
        os.fchmod(fd, FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
        if exclusive:
            try:
                os.link(tmp, destination)
            except FileExistsError as exc:
                raise DestinationExists(exc.errno, exc.strerror, str(destination)) from None
            tmp.unlink()
        else:
            os.replace(tmp, destination)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
