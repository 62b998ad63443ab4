"""Path utility for re-scoping slash-delimited ability paths."""

from __future__ import annotations

from typing import Sequence

SEPARATOR = "/"


def shift_path(path: str | Sequence[str], root: str) -> str:
    """Cut ``path`` so that it starts at the first ``root`` segment.

    Args:
        path: A ``/``-joined path, or its already-split segments.
        root: The segment the result must start with.

    Returns:
        The suffix beginning at ``root`` joined with ``/``, or ``""`` when
        ``root`` is not one of the segments.

    Examples:
        >>> shift_path("outside/app/login", "app")
        'app/login'
        >>> shift_path("outside/login", "app")
        ''
    """
    segments = path.split(SEPARATOR) if isinstance(path, str) else list(path)
    try:
        index = segments.index(root)
    except ValueError:
        return ""
    return SEPARATOR.join(segments[index:])
