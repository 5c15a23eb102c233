"""
Exception classes for the paths module.
"""

from manifestkit.constants import ROOT_PATH


class PathError(Exception):
    """Base exception for all path-related errors."""

    pass


class InvalidPath(PathError, ValueError):
    """Raised when a raw string cannot be turned into a path."""

    def __init__(self, path: str, message: str = ""):
        self.path = path
        super().__init__(message or f"invalid path '{path}'")


class StartsWithTildeError(InvalidPath):
    """Raised for home-directory paths, which must be expanded by the caller."""

    def __init__(self, path: str):
        super().__init__(
            path,
            f"invalid absolute path '{path}'; absolute path must begin with '{ROOT_PATH}'",
        )


class InvalidAbsolutePathError(InvalidPath):
    """Raised when an absolute path was required but not given."""

    def __init__(self, path: str):
        super().__init__(path, f"invalid absolute path '{path}'")


class InvalidRelativePathError(InvalidPath):
    """Raised when a relative path was required but not given."""

    def __init__(self, path: str):
        super().__init__(
            path,
            f"invalid relative path '{path}'; "
            f"relative path should not begin with '{ROOT_PATH}'",
        )


class PathOperandError(PathError, ValueError):
    """Raised when an operation receives a path of the wrong kind."""

    def __init__(self, operation: str, operand: str, expected: str):
        self.operation = operation
        self.operand = operand
        self.expected = expected
        super().__init__(f"{operation}: expected {expected}, got '{operand}'")
