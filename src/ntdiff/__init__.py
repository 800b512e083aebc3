"""ntdiff: severity classification of node type definition changes."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ntdiff")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Note: diff is exported from ntdiff.api, not from root, to avoid
# shadowing the ntdiff.kernel.diff module name
from ntdiff.api import check_registration, DiffResult, RegistrationVerdict
from ntdiff.kernel.diff import compare, NodeTypeDefDiff
from ntdiff.kernel.item_diff import InvalidInputError, Operation
from ntdiff.kernel.model import (
    NodeTypeDefinition,
    PropertyDefinition,
    ChildNodeDefinition,
    PropertyType,
    OnParentVersion,
)
from ntdiff.kernel.severity import Severity

__all__ = [
    "__version__",
    "compare",
    "check_registration",
    "NodeTypeDefDiff",
    "DiffResult",
    "RegistrationVerdict",
    "InvalidInputError",
    "Operation",
    "Severity",
    "NodeTypeDefinition",
    "PropertyDefinition",
    "ChildNodeDefinition",
    "PropertyType",
    "OnParentVersion",
]
