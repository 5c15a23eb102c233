from enum import Enum


class PathType(Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    RELATIVE_TO_ROOT = "relativeToRoot"


# Paths
PATH_SEPARATOR = "/"
ROOT_PATH = "/"
RELATIVE_TO_ROOT_PREFIX = "@/"
CURRENT_DIR = "."
PARENT_DIR = ".."

# Versions
MAX_VERSION_SEGMENT_COUNT = 5
ABSENT_SEGMENT = -1
