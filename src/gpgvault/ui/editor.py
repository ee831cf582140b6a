import logging
import shlex
import subprocess

from pathlib import Path

from gpgvault.utils.errors import EditorFailed

logger = logging.getLogger(__name__)


def run_editor(editor: str, path: Path) -> None:
    """Open ``path`` in ``editor`` and block until it exits."""
    cmd = shlex.split(editor)
    if not cmd:
        raise EditorFailed(editor, "no editor configured")
    logger.debug("launching %s", cmd[0])
    try:
        proc = subprocess.run([*cmd, str(path)])
    except OSError as exc:
        raise EditorFailed(editor, str(exc)) from exc
    if proc.returncode != 0:
        raise EditorFailed(editor, f"exited with status {proc.returncode}")
