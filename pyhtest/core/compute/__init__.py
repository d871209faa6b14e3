"""
Shared compute infrastructure for PyHTest.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Iteration caps and convergence tolerances
"""

from pyhtest.core.compute.timing import Timer
from pyhtest.core.compute.tolerances import (
    IterationLimits,
    BETACF,
    GAMMA_SERIES,
    GAMMA_CF,
    BISECTION,
)

__all__ = [
    # Timing
    "Timer",
    # Iteration limits
    "IterationLimits",
    "BETACF",
    "GAMMA_SERIES",
    "GAMMA_CF",
    "BISECTION",
]
