"""
Secant method for computing roots of scalar non-linear functions.
"""
from typing import Callable, Tuple, Dict, Any, Iterator, Optional

from scalar_roots.dtypes import DType, get_dtype, cast
from scalar_roots.root_finding.termination_criteria import (
    RelativeStepLength,
    CURRENT,
    TOL,
    MAX_ITERS,
)
from scalar_roots.root_finding.trace import IterationRecord

# root-finders

def secant_iterates(
    obj_fn: Callable,
    x0: Any,
    x1: Any,
    tol: float = TOL,
    maxiter: int = MAX_ITERS,
    dtype: Optional[DType] = None,
) -> Iterator[IterationRecord]:
    """Lazily run the secant method, yielding one record per step.
    The secant method requires two points to initialize; they are assumed to be distinct.
    A flat secant (f(x) == f(x_prev)) is not guarded against.
    :param obj_fn: a function that returns the objective when called at x.
    :param x0: initial guess for the root of 'obj_fn'.
    :param x1: a second initial guess.
    :param tol: (optional) relative tolerance on the step length.
    :param maxiter: (optional) the maximum number of iterations to run.
    :param dtype: (optional) the number type used for the iterates. Inferred from 'x1' by default.
    :returns: a generator of IterationRecord instances.
    """
    dtype = get_dtype(x1, dtype)
    criterion = RelativeStepLength(cast(tol, dtype), relative_to=CURRENT)

    # setup
    i = 0
    x_prev = cast(x0, dtype)
    x = cast(x1, dtype)
    f_prev = obj_fn(x_prev)
    f_curr = obj_fn(x)

    while criterion.should_continue(x, x_prev) and i < maxiter:
        i += 1

        # finite-difference approximation of the Newton step.
        x_new = x - f_curr * (x - x_prev) / (f_curr - f_prev)

        x_prev = x
        x = x_new

        # compute new function values.
        f_prev = f_curr
        f_curr = obj_fn(x)

        yield IterationRecord(i, x, f_curr, x_prev)

def secant(
    obj_fn: Callable,
    x0: Any,
    x1: Any,
    tol: float = TOL,
    maxiter: int = MAX_ITERS,
    callback: Optional[Callable] = None,
    dtype: Optional[DType] = None,
) -> Tuple[Any, Dict[str, Any]]:
    """Find a root of a scalar function using the secant method,
        x <- x - f(x) (x - x_prev) / (f(x) - f(x_prev)).
    Convergence is superlinear at simple roots and only linear at multiple roots.
    Running out of iterations is not an error; check exit_status["success"] or the residual.
    :param obj_fn: a function that returns the objective when called at x.
    :param x0: initial guess for the root of 'obj_fn'.
    :param x1: a second initial guess. The secant method requires two points to initialize.
    :param tol: (optional) relative tolerance on the step length.
    :param maxiter: (optional) the maximum number of iterations to run.
    :param callback: (optional) an observer called as callback(step, x, f(x)) after each step.
    :param dtype: (optional) the number type used for the iterates. Inferred from 'x1' by default.
    :returns: (x, exit_status) -- the final estimate of the root and status of the root-finder.
    """
    dtype = get_dtype(x1, dtype)
    criterion = RelativeStepLength(cast(tol, dtype), relative_to=CURRENT)

    x = cast(x1, dtype)
    fx = None
    # the starting points may already satisfy the tolerance.
    success = criterion(x, cast(x0, dtype))
    i = 0

    for record in secant_iterates(obj_fn, x0, x, tol, maxiter, dtype):
        i, x, fx = record.step, record.x, record.fx
        success = criterion(record.x, record.x_prev)

        if callback is not None:
            callback(record.step, record.x, record.fx)

    exit_status = {"success": success, "iterations": i, "residual": fx}

    return x, exit_status
