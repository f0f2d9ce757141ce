"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from typing import Callable, Optional

name = "lib_log_dispatch"
title = "Minimal leveled logging indirection for host applications"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_dispatch"


def print_info(writer: Optional[Callable[[str], object]] = None) -> None:
    """Write the metadata banner through ``writer``, one newline-terminated chunk.

    Examples
    --------
    >>> chunks = []
    >>> print_info(writer=chunks.append)
    >>> chunks[0].startswith("Info for lib_log_dispatch:")
    True
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    write = writer if writer is not None else sys.stdout.write
    write("\n".join(lines) + "\n")
