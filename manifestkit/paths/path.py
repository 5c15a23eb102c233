"""
Syntactic UNIX path value type.

A ``Path`` holds a single normalized string. Its kind is derived from the
string prefix:

- absolute paths start with ``/``
- root-relative paths start with ``@/`` and are anchored at the project root
- every other path is relative

Normalization is strictly syntactic and never accesses the file system, so it
may change the meaning of a path whose components are symbolic links on disk.
A leading ``~`` is rejected rather than expanded; home directory resolution
is the responsibility of the shell or the caller.
"""

from typing import List, Optional, Union

from manifestkit.constants import (
    CURRENT_DIR,
    PARENT_DIR,
    PATH_SEPARATOR,
    RELATIVE_TO_ROOT_PREFIX,
    ROOT_PATH,
    PathType,
)

from ._normalize import normalize_absolute, normalize_relative
from .exceptions import (
    InvalidAbsolutePathError,
    InvalidRelativePathError,
    PathOperandError,
    StartsWithTildeError,
)

HOME_PREFIX = "~"


class Path:
    """
    An immutable, normalized absolute, relative or root-relative path.

    Equality, hashing and ordering all use the canonical string, so paths
    can be used as dict keys and sorted deterministically.
    """

    __slots__ = ("_path_string",)

    ROOT: "Path"
    ROOT_PREFIX = RELATIVE_TO_ROOT_PREFIX

    def __init__(self, raw: Union[str, "Path"]):
        """
        Initialize a Path by validating and normalizing a string.

        Args:
            raw: Absolute (``/a``), root-relative (``@/a``) or relative path

        Raises:
            InvalidPath: If the string cannot be used as a path
        """
        if isinstance(raw, Path):
            normalized = raw.path_string
        elif not isinstance(raw, str):
            raise TypeError(f"Path must be built from a string, not {type(raw).__name__}")
        else:
            normalized = self._validated_string(raw)
        object.__setattr__(self, "_path_string", normalized)

    @classmethod
    def _from_canonical(cls, path_string: str) -> "Path":
        """Wrap a string that is already known to be normalized."""
        path = object.__new__(cls)
        object.__setattr__(path, "_path_string", path_string)
        return path

    @staticmethod
    def _validated_string(raw: str) -> str:
        if raw.startswith(ROOT_PATH):
            return normalize_absolute(raw)
        if raw.startswith(HOME_PREFIX):
            raise StartsWithTildeError(raw)
        if raw.startswith(RELATIVE_TO_ROOT_PREFIX):
            rest = raw[len(RELATIVE_TO_ROOT_PREFIX) :]
            return RELATIVE_TO_ROOT_PREFIX + normalize_relative(rest)
        return Path._relative_string(raw)

    @staticmethod
    def _relative_string(raw: str) -> str:
        normalized = normalize_relative(raw)
        # "./@/a" would otherwise turn into a root-relative path
        if normalized.startswith(RELATIVE_TO_ROOT_PREFIX):
            raise InvalidRelativePathError(raw)
        return normalized

    # Construction

    @classmethod
    def validate(cls, raw: str) -> "Path":
        """Validate a path of any kind, dispatching on its prefix."""
        return cls(raw)

    @classmethod
    def validate_absolute(cls, raw: str) -> "Path":
        """
        Validate a path that must be absolute.

        Raises:
            StartsWithTildeError: If the path starts with ``~``
            InvalidAbsolutePathError: If the path does not start with ``/``
        """
        if raw.startswith(HOME_PREFIX):
            raise StartsWithTildeError(raw)
        if not raw.startswith(ROOT_PATH):
            raise InvalidAbsolutePathError(raw)
        return cls._from_canonical(normalize_absolute(raw))

    @classmethod
    def validate_relative(cls, raw: str) -> "Path":
        """
        Validate a path that must be relative to an unknown base.

        Raises:
            StartsWithTildeError: If the path starts with ``~``
            InvalidRelativePathError: If the path starts with ``/`` or ``@/``
        """
        if raw.startswith(HOME_PREFIX):
            raise StartsWithTildeError(raw)
        return cls._from_canonical(cls._relative_string(raw))

    @classmethod
    def validate_relative_to_root(cls, raw: str) -> "Path":
        """
        Validate a path that must carry the root-relative ``@/`` prefix.

        Raises:
            InvalidRelativePathError: If the prefix is missing or the rest of
                the path is not relative
        """
        if not raw.startswith(RELATIVE_TO_ROOT_PREFIX):
            raise InvalidRelativePathError(raw)
        rest = raw[len(RELATIVE_TO_ROOT_PREFIX) :]
        return cls._from_canonical(RELATIVE_TO_ROOT_PREFIX + normalize_relative(rest))

    @classmethod
    def validate_relative_to(cls, raw: str, base: "Path") -> "Path":
        """
        Resolve a string against ``base`` when it is not already absolute.

        Absolute input is validated and returned as is, ignoring ``base``.
        """
        base._require_absolute("validate_relative_to")
        if raw.startswith(ROOT_PATH):
            return cls.validate_absolute(raw)
        return cls.joined(base, cls.validate_relative(raw))

    @classmethod
    def joined(cls, base: "Path", relative: Union["Path", str]) -> "Path":
        """Concatenate an absolute base and a relative path, renormalizing if needed."""
        base._require_absolute("joined")
        if isinstance(relative, str):
            relative = cls.validate_relative(relative)
        return base.appending(relative)

    @classmethod
    def absolute(cls, raw: str) -> "Path":
        return cls.validate_absolute(raw)

    @classmethod
    def relative_to_manifest(cls, raw: str) -> "Path":
        return cls.validate_relative(raw)

    @classmethod
    def relative_to_root(cls, raw: str) -> "Path":
        """Build a root-relative path; ``raw`` is given without the ``@/`` prefix."""
        return cls.validate_relative_to_root(RELATIVE_TO_ROOT_PREFIX + raw)

    @staticmethod
    def is_valid_component(name: str) -> bool:
        """
        Check if the given name is a valid individual path component.

        This only checks the semantics enforced by this type; particular
        file systems may have additional requirements.
        """
        return name not in ("", CURRENT_DIR, PARENT_DIR) and PATH_SEPARATOR not in name

    # Attributes

    @property
    def path_string(self) -> str:
        return self._path_string

    @property
    def clear_path_string(self) -> str:
        """Path string without the root-relative ``@/`` prefix."""
        if self._path_string.startswith(RELATIVE_TO_ROOT_PREFIX):
            return self._path_string[len(RELATIVE_TO_ROOT_PREFIX) :]
        return self._path_string

    @property
    def path_type(self) -> PathType:
        if self._path_string.startswith(ROOT_PATH):
            return PathType.ABSOLUTE
        if self._path_string.startswith(RELATIVE_TO_ROOT_PREFIX):
            return PathType.RELATIVE_TO_ROOT
        return PathType.RELATIVE

    @property
    def is_absolute(self) -> bool:
        return self.path_type is PathType.ABSOLUTE

    @property
    def is_relative(self) -> bool:
        return self.path_type is PathType.RELATIVE

    @property
    def is_relative_to_root(self) -> bool:
        return self.path_type is PathType.RELATIVE_TO_ROOT

    @property
    def is_root(self) -> bool:
        """True if the path is the root directory."""
        return self._path_string == ROOT_PATH

    @property
    def dirname(self) -> str:
        """
        Directory component as a string.

        The directory of the root is the root itself. For relative paths this
        is the string form of ``parent_directory``, so the parent of ``.`` is
        ``..`` and the parent of ``..`` is ``../..``.

        This is not the text before the last separator: slicing would turn
        ``../..`` into ``..`` and ``@/a`` into ``@``, neither of which names
        the parent directory.
        """
        return self.parent_directory.path_string

    @property
    def basename(self) -> str:
        """Last path component, including the suffix. Never empty."""
        if self.is_root:
            return ROOT_PATH
        return self._path_string[self._path_string.rfind(PATH_SEPARATOR) + 1 :]

    @property
    def basename_without_ext(self) -> str:
        ext = self.extension
        if ext is not None:
            return self.basename[: -(len(ext) + 1)]
        return self.basename

    @property
    def components(self) -> List[str]:
        """
        Components of the path, in order.

        An absolute path starts with a ``/`` pseudo-component and a
        root-relative path with ``@``; the relative path ``.`` has the single
        component ``.``.
        """
        parts = [p for p in self._path_string.split(PATH_SEPARATOR) if p]
        if self.is_absolute:
            return [ROOT_PATH] + parts
        return parts

    @property
    def parent_directory(self) -> "Path":
        """
        Path of the parent directory.

        Every path has a parent; the parent of the root is the root itself.
        """
        kind = self.path_type
        if kind is PathType.ABSOLUTE:
            if self.is_root:
                return self
            pos = self._path_string.rfind(PATH_SEPARATOR)
            return Path._from_canonical(self._path_string[:pos] or ROOT_PATH)

        parent = normalize_relative(self.clear_path_string + PATH_SEPARATOR + PARENT_DIR)
        if kind is PathType.RELATIVE_TO_ROOT:
            return Path._from_canonical(RELATIVE_TO_ROOT_PREFIX + parent)
        return Path._from_canonical(parent)

    def suffix_with_dot(self, with_dot: bool) -> Optional[str]:
        """
        Suffix of the basename, with or without its leading ``.``.

        A basename that starts with ``.`` has no suffix unless it contains
        another interior dot, and a trailing ``.`` is not a suffix.
        """
        name = self.basename.lstrip(".")
        pos = name.rfind(".")
        if pos <= 0 or pos == len(name) - 1:
            return None
        return name[pos:] if with_dot else name[pos + 1 :]

    @property
    def suffix(self) -> Optional[str]:
        """Suffix including the leading ``.``, e.g. ``.swift``."""
        return self.suffix_with_dot(True)

    @property
    def extension(self) -> Optional[str]:
        """Suffix without the leading ``.``, e.g. ``swift``."""
        return self.suffix_with_dot(False)

    # Derived paths

    def appending_component(self, name: str) -> "Path":
        """
        Return the path with one literal component appended.

        ``""`` and ``.`` are no-ops and ``..`` yields the parent directory.

        Raises:
            PathOperandError: If ``name`` contains a path separator
        """
        if PATH_SEPARATOR in name:
            raise PathOperandError("appending_component", name, "a single component")

        if name in ("", CURRENT_DIR):
            return self
        if name == PARENT_DIR:
            return self.parent_directory

        if self.is_root:
            return Path._from_canonical(ROOT_PATH + name)
        if self.clear_path_string == CURRENT_DIR:
            prefix = self._path_string[: -len(CURRENT_DIR)]
            return Path._from_canonical(prefix + name)
        return Path._from_canonical(self._path_string + PATH_SEPARATOR + name)

    def appending_components(self, *names: str) -> "Path":
        """Append several literal components, left to right."""
        path = self
        for name in names:
            path = path.appending_component(name)
        return path

    def appending(self, relative: "Path") -> "Path":
        """
        Return the path with a relative path applied.

        Both operands are already normalized, so the concatenation only needs
        renormalizing when the appended path starts with ``.``, which is the
        only way it can begin with ``..``, or when the receiver is ``.``.

        Raises:
            PathOperandError: If ``relative`` is not a plain relative path
        """
        if not relative.is_relative:
            raise PathOperandError("appending", relative.path_string, "a relative path")

        relative_string = relative.path_string
        if self.is_root:
            joined = ROOT_PATH + relative_string
        else:
            joined = self._path_string + PATH_SEPARATOR + relative_string

        if not (
            relative_string.startswith(CURRENT_DIR)
            or self.clear_path_string == CURRENT_DIR
        ):
            return Path._from_canonical(joined)

        kind = self.path_type
        if kind is PathType.ABSOLUTE:
            return Path._from_canonical(normalize_absolute(joined))
        if kind is PathType.RELATIVE_TO_ROOT:
            rest = joined[len(RELATIVE_TO_ROOT_PREFIX) :]
            return Path._from_canonical(RELATIVE_TO_ROOT_PREFIX + normalize_relative(rest))
        return Path._from_canonical(normalize_relative(joined))

    def relative_to(self, base: "Path") -> "Path":
        """
        Return the relative path that, appended to ``base``, yields this path.

        Any two absolute paths share at least the root, so the result always
        exists; it begins with ``..`` components when ``base`` is not an
        ancestor of this path. Symbolic links are not taken into account.

        Raises:
            PathOperandError: If either operand is not absolute
        """
        self._require_absolute("relative_to")
        base._require_absolute("relative_to")

        target = self._path_string
        origin = base._path_string

        if target == origin:
            return Path._from_canonical(CURRENT_DIR)

        # /Users/a -> /Users/a/b
        if base.is_ancestor_of(self):
            return Path._from_canonical(target[len(origin.rstrip(PATH_SEPARATOR)) + 1 :])

        # /Users/a/b -> /Users/a
        if self.is_ancestor_of(base):
            ups = len(base.components) - len(self.components)
            return Path._from_canonical(PATH_SEPARATOR.join([PARENT_DIR] * ups))

        # Back up from the first differing character to a separator boundary.
        pos = 0
        limit = min(len(target), len(origin))
        while pos < limit and target[pos] == origin[pos]:
            pos += 1
        boundary = target.rfind(PATH_SEPARATOR, 0, pos) + 1

        ups = origin[boundary:].count(PATH_SEPARATOR) + 1
        parts = [PARENT_DIR] * ups + [target[boundary:]]
        return Path._from_canonical(PATH_SEPARATOR.join(parts))

    # Ancestry

    def is_ancestor_of(self, descendant: "Path") -> bool:
        """True if this path strictly contains ``descendant``."""
        self._require_absolute("is_ancestor_of")
        descendant._require_absolute("is_ancestor_of")

        own = self._path_string
        other = descendant._path_string
        if len(other) <= len(own) or not other.startswith(own):
            return False
        return self.is_root or other[len(own)] == PATH_SEPARATOR

    def is_ancestor_of_or_equal(self, descendant: "Path") -> bool:
        self._require_absolute("is_ancestor_of_or_equal")
        descendant._require_absolute("is_ancestor_of_or_equal")
        if len(self._path_string) == len(descendant._path_string):
            return self._path_string == descendant._path_string
        return self.is_ancestor_of(descendant)

    def is_descendant_of(self, ancestor: "Path") -> bool:
        """True if ``ancestor`` strictly contains this path."""
        return ancestor.is_ancestor_of(self)

    def is_descendant_of_or_equal(self, ancestor: "Path") -> bool:
        return ancestor.is_ancestor_of_or_equal(self)

    def _require_absolute(self, operation: str) -> None:
        if not self.is_absolute:
            raise PathOperandError(operation, self._path_string, "an absolute path")

    # Protocols

    def __truediv__(self, other: Union[str, "Path"]) -> "Path":
        if isinstance(other, Path):
            return self.appending(other)
        if isinstance(other, str):
            return self.appending(Path.validate_relative(other))
        return NotImplemented

    def __str__(self) -> str:
        return self._path_string

    def __repr__(self) -> str:
        return f'<Path:"{self._path_string}">'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path_string == other._path_string

    def __lt__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path_string < other._path_string

    def __le__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path_string <= other._path_string

    def __gt__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path_string > other._path_string

    def __ge__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path_string >= other._path_string

    def __hash__(self) -> int:
        return hash(self._path_string)

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"Path is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path is immutable: cannot delete '{name}'")

    def __reduce__(self):
        return (self.__class__, (self._path_string,))


Path.ROOT = Path._from_canonical(ROOT_PATH)

