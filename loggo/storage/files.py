"""Atomic file writes for log and workspace files."""

import os
import tempfile
from pathlib import Path


def write_text_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with UTF-8 ``content`` without partial writes.
    
    The text is encoded before anything touches the disk, then written to
    a temporary file beside the target and moved into place. The previous
    file is left as it was if any step fails.
    
    Args:
        path: Destination file; parent directories are created.
        content: Text to write.
        
    Raises:
        UnicodeEncodeError: If the text cannot be encoded as UTF-8.
        OSError: If the file cannot be written.
    """
    data = content.encode("utf-8")
    
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except Exception:
        os.remove(tmp_path)
        raise
