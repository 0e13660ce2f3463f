"""
Newton's method for computing roots of scalar non-linear functions.
"""
from typing import Callable, Tuple, Dict, Any, Iterator, Optional

from scalar_roots.dtypes import DType, get_dtype, cast, infinity
from scalar_roots.root_finding.termination_criteria import (
    RelativeStepLength,
    PREVIOUS,
    TOL,
    MAX_ITERS,
)
from scalar_roots.root_finding.trace import IterationRecord

# root-finders

def newton_iterates(
    obj_fn: Callable,
    grad_fn: Callable,
    x0: Any,
    tol: float = TOL,
    maxiter: int = MAX_ITERS,
    dtype: Optional[DType] = None,
) -> Iterator[IterationRecord]:
    """Lazily run Newton's method, yielding one record per step.
    The iteration stops once the relative step length drops to 'tol' or after 'maxiter' steps.
    Division by a zero derivative is not guarded against.
    :param obj_fn: a function that returns the objective when called at x.
    :param grad_fn: a function that returns the derivative of the objective when called at x.
    :param x0: initial guess for the root of 'obj_fn'.
    :param tol: (optional) relative tolerance on the step length.
    :param maxiter: (optional) the maximum number of iterations to run.
    :param dtype: (optional) the number type used for the iterates. Inferred from 'x0' by default.
    :returns: a generator of IterationRecord instances.
    """
    dtype = get_dtype(x0, dtype)
    criterion = RelativeStepLength(cast(tol, dtype), relative_to=PREVIOUS)

    # setup
    i = 0
    x = cast(x0, dtype)
    fx = obj_fn(x)

    x_old = x
    # guarantees that the first test does not pass.
    x_new = infinity(dtype)

    while criterion.should_continue(x_new, x_old) and i < maxiter:
        i += 1

        # take step.
        x_new = x - fx / grad_fn(x)

        x_old = x
        x = x_new
        fx = obj_fn(x)

        yield IterationRecord(i, x, fx, x_old)

def newton(
    obj_fn: Callable,
    grad_fn: Callable,
    x0: Any,
    tol: float = TOL,
    maxiter: int = MAX_ITERS,
    callback: Optional[Callable] = None,
    dtype: Optional[DType] = None,
) -> Tuple[Any, Dict[str, Any]]:
    """Find a root of a scalar function using Newton's method,
        x <- x - f(x) / f'(x).
    Running out of iterations is not an error; check exit_status["success"] or the residual.
    :param obj_fn: a function that returns the objective when called at x.
    :param grad_fn: a function that returns the derivative of the objective when called at x.
    :param x0: initial guess for the root of 'obj_fn'.
    :param tol: (optional) relative tolerance on the step length.
    :param maxiter: (optional) the maximum number of iterations to run.
    :param callback: (optional) an observer called as callback(step, x, f(x)) after each step.
    :param dtype: (optional) the number type used for the iterates. Inferred from 'x0' by default.
    :returns: (x, exit_status) -- the final estimate of the root and status of the root-finder.
    """
    dtype = get_dtype(x0, dtype)
    criterion = RelativeStepLength(cast(tol, dtype), relative_to=PREVIOUS)

    x = cast(x0, dtype)
    fx = None
    success = False
    i = 0

    for record in newton_iterates(obj_fn, grad_fn, x, tol, maxiter, dtype):
        i, x, fx = record.step, record.x, record.fx
        success = criterion(record.x, record.x_prev)

        if callback is not None:
            callback(record.step, record.x, record.fx)

    exit_status = {"success": success, "iterations": i, "residual": fx}

    return x, exit_status
