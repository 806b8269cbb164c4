# The MIT License (MIT)
# Copyright (c) 2025 Jozef Darida
# HH Vacancy Monitor Project

"""Report Sink.

Writes a finished report block either to standard output or to the end of
a log file. Files are only ever appended to, never truncated.
"""

import sys
from pathlib import Path
from typing import Optional, Union


def write_to_stdout(entry: str) -> None:
    """Prints the block unmodified.

    Undecodable argv bytes (surrogates) are written back as the original bytes.
    """
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(entry)
        sys.stdout.flush()
        return
    sys.stdout.flush()
    buffer.write(entry.encode(sys.stdout.encoding or "utf-8", "surrogateescape"))
    buffer.flush()


def save_to_file(file_path: Union[str, Path], entry: str) -> None:
    """Appends the block plus a blank separator line to the file.

    Args:
        file_path: Destination file, created if missing.
        entry: Report block, already newline-terminated.

    Raises:
        OSError: If the file cannot be opened or written.
    """
    with Path(file_path).open("a", encoding="utf-8", errors="surrogateescape") as f:
        f.write(entry + "\n")


def emit(entry: str, file_path: Optional[str] = None) -> None:
    """Sends the block to the file if one is given, otherwise to stdout."""
    if file_path:
        save_to_file(file_path, entry)
    else:
        write_to_stdout(entry)


# End of src/utils/sink.py (v. 00004)
