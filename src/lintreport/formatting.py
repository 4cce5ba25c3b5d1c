"""Small text helpers shared by the renderers."""

from __future__ import annotations

_KIB = 1024
_MIB = _KIB * 1024
_GIB = _MIB * 1024


def ucfirst(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def format_memory(size: int) -> str:
    """Human readable byte count (1024-based)."""
    if size >= _GIB:
        return f"{size / _GIB:.1f} GiB"
    if size >= _MIB:
        return f"{size / _MIB:.1f} MiB"
    if size >= _KIB:
        return f"{size // _KIB} KiB"
    return f"{size} B"


def format_duration(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m {rest:.2f}s"
