"""Round-trip text through the user's $EDITOR."""
from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
from pathlib import Path

from .errors import EditorFailure

log = logging.getLogger(__name__)


def run_editor(editor: str | None, text: str) -> str:
    """Open `text` in `editor` and return what the user saved.

    Args:
        editor: Editor command line, e.g. "vim" or "code --wait"
        text: Initial buffer contents

    Returns:
        The edited file contents

    Raises:
        EditorFailure: no editor configured, it could not start, or it exited non-zero
    """
    if not editor or not editor.strip():
        raise EditorFailure("no editor configured, set $EDITOR")

    fd, name = tempfile.mkstemp(prefix="kk-", suffix=".md")
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)

        cmd = shlex.split(editor) + [str(path)]
        log.debug("running editor: %s", cmd)
        try:
            proc = subprocess.run(cmd, check=False)
        except OSError as e:
            raise EditorFailure(f"could not start editor {cmd[0]!r}: {e}") from e
        if proc.returncode != 0:
            raise EditorFailure(f"editor exited with status {proc.returncode}")

        return path.read_text(encoding="utf-8")
    finally:
        path.unlink(missing_ok=True)
