"""
File I/O with atomic writes.

State is owned by a single process at a time, so writes go through a temporary
file and ``os.replace`` without any locking.
"""

import os
import sys
import tempfile
from pathlib import Path


def read_text(file_path: str) -> str:
    """
    Read a UTF-8 text file.

    Args:
        file_path: Path to read

    Returns:
        File content, or an empty string if the file does not exist

    Raises:
        OSError: If the file exists but cannot be read
    """
    path_obj = Path(os.path.expanduser(file_path))
    try:
        with path_obj.open('r', encoding='utf-8') as handle:
            return handle.read()
    except FileNotFoundError:
        return ""


def atomic_write(file_path: str, content: str) -> bool:
    """
    Atomically write content to file.

    Args:
        file_path: Path to write to
        content: Content to write
    
    Returns:
        True if successful, False otherwise
    """
    file_path = os.path.expanduser(file_path)
    path_obj = Path(file_path)

    tmp_path = None
    try:
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode='w',
            dir=str(path_obj.parent),
            prefix='.tmp_',
            delete=False,
            encoding='utf-8'
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            tmp_file.write(content)

        os.replace(str(tmp_path), str(path_obj))
        return True

    except OSError as exc:
        print(f"Error writing to {file_path}: {exc}", file=sys.stderr)
    finally:
        if tmp_path and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass

    return False
