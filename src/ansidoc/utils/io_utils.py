#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ansidoc/utils/io_utils.py
"""Output helpers for writing rendered text."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write rendered text to a path or stream.

    Parameters
    ----------
    text : str
        Text to write; encoded as UTF-8 for paths and binary streams
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Can be:
        - str or Path: Writes the text to a file at that path
        - IO[bytes]: Writes UTF-8 bytes to a binary file-like object
        - IO[str]: Writes text to a text file-like object

    Raises
    ------
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = StringIO()
        >>> write_content("Hello", buffer)
        >>> buffer.getvalue()
        'Hello'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(text, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    # Detect binary or text mode, concrete types first
    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    elif hasattr(output, "mode"):
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode
    else:
        is_binary_mode = False

    if is_binary_mode:
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)


__all__ = ["write_content"]
