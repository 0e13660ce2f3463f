"""
Root-finding methods.
"""

from .secant import secant, secant_iterates
from .newton import newton, newton_iterates
from .trace import IterationRecord
from .termination_criteria import (
    TerminationCriterion,
    RelativeStepLength,
    get_criterion,
    TOL,
    MAX_ITERS,
)

__all__ = [
    "secant",
    "secant_iterates",
    "newton",
    "newton_iterates",
    "IterationRecord",
    "TerminationCriterion",
    "RelativeStepLength",
    "get_criterion",
    "TOL",
    "MAX_ITERS",
]
