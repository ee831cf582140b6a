"""Scratch space for plaintext that has to exist as a file (``vault edit``).

Each acquisition gets its own 0700 directory under the configured scratch
root, never under the vault. The scratch file is zeroed and unlinked on every
exit path before control returns to the caller.
"""
from __future__ import annotations

import logging
import os
import shutil
import tempfile

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from gpgvault.utils.dataModels import DIR_MODE, FILE_MODE
from gpgvault.utils.errors import CleanupFailed

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _zero_fill(path: Path) -> None:
    size = path.stat().st_size
    with path.open("r+b") as f:
        f.write(b"\0" * size)
        f.flush()
        os.fsync(f.fileno())


class TempWorkspace:
    def __init__(self, scratch_root: Path):
        self.scratch_root = scratch_root

    @contextmanager
    def scratch_file(self, name: str) -> Iterator[Path]:
        """Yield an empty 0600 file whose relative path mirrors ``name``."""
        self.scratch_root.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        run_dir = Path(tempfile.mkdtemp(prefix="vault-", dir=self.scratch_root))
        path = run_dir.joinpath(*name.split("/"))
        try:
            path.parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            os.close(os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, FILE_MODE))
        except BaseException:
            shutil.rmtree(run_dir, ignore_errors=True)
            raise

        try:
            yield path
        except BaseException:
            # the body's failure wins; a cleanup failure is only reported
            warning = self._release(path, run_dir)
            if warning is not None:
                logger.warning("%s", warning)
            raise
        warning = self._release(path, run_dir)
        if warning is not None:
            logger.warning("%s", warning)

    def with_scratch_file(self, name: str, body: Callable[[Path], T]) -> T:
        with self.scratch_file(name) as path:
            return body(path)

    def _release(self, path: Path, run_dir: Path) -> CleanupFailed | None:
        try:
            if path.exists():
                try:
                    _zero_fill(path)
                except OSError as exc:
                    logger.debug("could not zero %s: %s", path, exc)
                path.unlink()
            # run_dir is private to this acquisition; editor swap and backup
            # files left next to the scratch file go with it
            shutil.rmtree(run_dir)
        except OSError as exc:
            return CleanupFailed(path, exc)
        return None
