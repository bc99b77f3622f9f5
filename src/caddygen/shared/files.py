"""File writing helpers."""

import os
import stat
import tempfile
from pathlib import Path


def _target_mode(path: Path) -> int:
    """Mode the written file should end up with.

    An existing file keeps its permission bits. A new file gets the usual
    0o666 masked by the process umask, like a plain open() would.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    # umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write_text(path: Path, content: str) -> None:
    """Write text to a file by replacing it in one step.

    The content goes to a temporary file next to ``path`` which is then
    renamed over it, so readers see either the old file or the new one.
    mkstemp creates the temporary file as 0o600, so its mode is reset to
    what a direct write would have produced before the rename.

    Args:
        path: Destination file
        content: Full file content

    Raises:
        OSError: If the temporary file cannot be written or renamed
    """
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
