"""
Generic result container for all PyHTest computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (df, bisection diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility; dict fields are
      copied into read-only MappingProxyType views
"""

import platform
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar, Generic, Any, Mapping

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software stack that produced a result."""
    from pyhtest import __version__

    return {
        'pyhtest_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (statistic, p-value, etc.)
        info: Structured metadata (df, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Package and runtime versions

    Examples:
        >>> Result(
        ...     params=HypothesisParams(...),
        ...     info={'df': 4.0, 'critical_value_converged': True},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_hypothesis'
        ... )
    """
    params: P
    info: Mapping[str, Any]
    timing: Mapping[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: Mapping[str, str] = field(default_factory=_default_provenance)

    def __post_init__(self) -> None:
        for name in ("info", "timing", "provenance"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, MappingProxyType(dict(value)))
        object.__setattr__(self, "warnings", tuple(self.warnings))

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
