"""
Square roots by the Babylonian method, i.e. Newton's method applied to f(x) = x^2 - a.
"""
from typing import Callable, Tuple, Dict, Any, Optional

from scalar_roots.dtypes import DType, get_dtype, cast
from scalar_roots.root_finding import newton, TOL, MAX_ITERS


def babylonian_sqrt(
    a: Any,
    x0: Optional[Any] = None,
    tol: float = TOL,
    maxiter: int = MAX_ITERS,
    callback: Optional[Callable] = None,
    dtype: Optional[DType] = None,
) -> Tuple[Any, Dict[str, Any]]:
    """Compute sqrt(a) with the iteration
        x <- x - (x^2 - a) / 2x = (x + a / x) / 2,
    which converges quadratically for any positive starting point.
    Pass `dtype=decimal.Decimal` (and set the decimal context precision) for more digits than a float holds.
    :param a: non-negative number whose square root is sought.
    :param x0: (optional) initial guess. Defaults to 'a'.
    :param tol: (optional) relative tolerance on the step length.
    :param maxiter: (optional) the maximum number of iterations to run.
    :param callback: (optional) an observer called as callback(step, x, f(x)) after each step.
    :param dtype: (optional) the number type used for the iterates.
    :returns: (x, exit_status) -- the approximate square root and status of the root-finder.
    """
    dtype = get_dtype(a if x0 is None else x0, dtype)
    a = cast(a, dtype)

    if a < 0:
        raise ValueError(f"Cannot take the real square root of negative number {a}!")
    if a == 0:
        return a, {"success": True, "iterations": 0, "residual": a}

    if x0 is None:
        x0 = a

    def obj_fn(x):
        return x * x - a

    def grad_fn(x):
        return 2 * x

    return newton(obj_fn, grad_fn, x0, tol, maxiter, callback=callback, dtype=dtype)
