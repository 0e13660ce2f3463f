"""
Records emitted by root-finding iterations.
"""
from typing import Any, NamedTuple


class IterationRecord(NamedTuple):

    """One step of a root-finding iteration.

    Attributes:
        step: the (1-based) index of the step.
        x: the new estimate of the root.
        fx: the objective evaluated at 'x'.
        x_prev: the estimate the step started from. Together with 'x' it spans the
            segment along which the tangent (Newton) or secant line was followed.
    """

    step: int
    x: Any
    fx: Any
    x_prev: Any
