"""
`scalar_roots`: Newton and secant iterations for finding roots of scalar functions.

The iterators return `(x, exit_status)`; `exit_status["success"]` reports whether the
relative step-length tolerance was met within the iteration budget.
"""

from scalar_roots.root_finding import (
    newton,
    newton_iterates,
    secant,
    secant_iterates,
    IterationRecord,
    TOL,
)
from scalar_roots.sqrt import babylonian_sqrt
from scalar_roots.callbacks import TraceRecorder, LoggingCallback, CallbackList
from scalar_roots.wrappers import find_root, get_root_finder, NEWTON, SECANT, METHODS

__all__ = [
    "newton",
    "newton_iterates",
    "secant",
    "secant_iterates",
    "IterationRecord",
    "babylonian_sqrt",
    "TraceRecorder",
    "LoggingCallback",
    "CallbackList",
    "find_root",
    "get_root_finder",
    "NEWTON",
    "SECANT",
    "METHODS",
    "TOL",
]
