"""Configuration constants for go-resolve."""

# Version
__version__ = "0.3.0"

# File names (relative to a project directory)
MANIFEST_FILE_NAME = "go-resolve.toml"
"""Manifest declaring a project's dependencies"""

LOCK_FILE_NAME = "go-resolve.lock"
"""Lock file written from a resolved dependency tree"""

LOCK_FILE_VERSION = 1
"""Schema version stored in lock files"""

# Resolution defaults
DEFAULT_STRATEGY = "hybrid"
"""Produce strategy used for the root project when none is specified"""

DEFAULT_CONFIGURATION = "build"
"""Dependency configuration used when none is specified"""

GOPATH_ENV_VAR = "GOPATH"
"""Environment variable listing local source roots"""

DEFAULT_GOPATH = "${HOME}/go"
"""Fallback source root when GOPATH is unset"""

# Source scanning
IGNORED_SOURCE_DIRS = ("vendor", "testdata")
"""Directories never scanned for imports"""

GO_FILE_SUFFIX = ".go"
GO_TEST_FILE_SUFFIX = "_test.go"
