"""Encryption gateway backed by the ``gpg`` executable.

The gateway never sees keys or ciphertext structure: plaintext is piped into
``gpg --encrypt`` whose output stream goes straight into a 0600 sibling file of
the destination, and envelopes are read back through ``gpg --decrypt``. Every
pipe is drained and closed before a call returns.
"""
from __future__ import annotations

import logging
import subprocess

from pathlib import Path
from typing import List

from gpgvault.storage.vault import atomic_output
from gpgvault.utils.dataModels import DEFAULT_GPG
from gpgvault.utils.errors import DecryptionFailed, EncryptionFailed, EntryNotFound

logger = logging.getLogger(__name__)

BASE_ARGS = ["--batch", "--yes", "--quiet"]


class GpgGateway:
    def __init__(self, binary: str = DEFAULT_GPG):
        self.binary = binary

    def _command(self, *args: str) -> List[str]:
        return [self.binary, *BASE_ARGS, *args]

    def encrypt(self, plaintext: bytes, recipient: str, destination: Path, *, exclusive: bool = False) -> None:
        """Write an envelope of ``plaintext`` for ``recipient`` to ``destination``.

        ``destination`` is only replaced once the backend has exited cleanly.
        With ``exclusive`` an existing destination is never replaced and
        DestinationExists propagates.
        """
        cmd = self._command("--encrypt", "--recipient", recipient)
        logger.debug("encrypting to %s for %s", destination, recipient)
        with atomic_output(destination, exclusive=exclusive) as out:
            try:
                proc = subprocess.Popen(cmd, stdin=subprocess.PIPE, stdout=out, stderr=subprocess.PIPE)
            except OSError as exc:
                raise EncryptionFailed(destination, f"backend unavailable: {exc}") from exc
            _, err = proc.communicate(plaintext)
            if proc.returncode != 0:
                raise EncryptionFailed(destination, err.decode("utf-8", errors="replace"))

    def decrypt(self, source: Path) -> bytes:
        if not source.is_file():
            raise EntryNotFound(str(source))

        cmd = self._command("--decrypt", str(source))
        logger.debug("decrypting %s", source)
        try:
            proc = subprocess.run(cmd, stdin=subprocess.DEVNULL, capture_output=True)
        except OSError as exc:
            raise DecryptionFailed(source, f"backend unavailable: {exc}") from exc
        if proc.returncode != 0:
            raise DecryptionFailed(source, proc.stderr.decode("utf-8", errors="replace"))
        return proc.stdout
