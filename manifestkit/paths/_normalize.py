"""Syntactic normalization of UNIX path strings.

Both functions make a single left-to-right pass over the separator-delimited
components of the input and never touch the file system:

- empty components (doubled or trailing separators) are dropped
- ``.`` components are dropped
- ``..`` removes the preceding real component

An absolute path cannot go above the root, so ``/../a`` becomes ``/a``. A
relative path has no known anchor, so leading ``..`` components that have
nothing left to collapse against are kept.
"""

from typing import List, Tuple

from manifestkit.constants import CURRENT_DIR, PARENT_DIR, PATH_SEPARATOR, ROOT_PATH

from .exceptions import InvalidAbsolutePathError, InvalidRelativePathError


def _collapse(raw: str) -> Tuple[int, List[str]]:
    """Return the number of uncollapsible ``..`` components and the rest."""
    parents = 0
    parts: List[str] = []
    start = 0
    length = len(raw)

    while start <= length:
        end = raw.find(PATH_SEPARATOR, start)
        if end == -1:
            end = length
        component = raw[start:end]
        start = end + 1

        if component == "" or component == CURRENT_DIR:
            continue
        if component == PARENT_DIR:
            if parts:
                parts.pop()
            else:
                parents += 1
            continue
        parts.append(component)

    return parents, parts


def normalize_absolute(raw: str) -> str:
    """Normalize an absolute path string.

    Args:
        raw: Path string starting with ``/``

    Returns:
        Canonical string; always starts with ``/`` and only ends with one
        when the whole path is the root.

    Raises:
        InvalidAbsolutePathError: If ``raw`` does not start with ``/``
    """
    if not raw.startswith(ROOT_PATH):
        raise InvalidAbsolutePathError(raw)

    # Excess ``..`` components are dropped at the root.
    _, parts = _collapse(raw)
    return ROOT_PATH + PATH_SEPARATOR.join(parts)


def normalize_relative(raw: str) -> str:
    """Normalize a relative path string.

    Args:
        raw: Path string not starting with ``/``

    Returns:
        Canonical string; ``.`` when nothing is left after normalization.

    Raises:
        InvalidRelativePathError: If ``raw`` starts with ``/``
    """
    if raw.startswith(PATH_SEPARATOR):
        raise InvalidRelativePathError(raw)

    parents, parts = _collapse(raw)
    normalized = PATH_SEPARATOR.join([PARENT_DIR] * parents + parts)
    return normalized or CURRENT_DIR
