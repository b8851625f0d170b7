"""lottieslim: deterministic size optimization for Lottie animation documents."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("lottieslim")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from lottieslim.api import (
    check,
    validate,
    optimize,
    byte_size,
    format_bytes,
    OptimizationResult,
    ValidationIssue,
    ValidationResult,
)
from lottieslim.kernel.options import OptimizationOptions
from lottieslim.codes import ValidationCode

__all__ = [
    "__version__",
    "check",
    "validate",
    "optimize",
    "byte_size",
    "format_bytes",
    "OptimizationOptions",
    "OptimizationResult",
    "ValidationIssue",
    "ValidationResult",
    "ValidationCode",
]
