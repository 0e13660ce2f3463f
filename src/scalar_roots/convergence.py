"""
Empirical convergence analysis of root-finding iterations.

Given the sequence of iterates x_0, x_1, ... and the root x*, the errors e_k = |x_k - x*| satisfy
    e_{k+1} ~ C e_k^p
where p is the order of convergence: p = 2 for Newton's method at a simple root, p = (1 + sqrt(5)) / 2
for the secant method at a simple root and p = 1 for both methods at a multiple root.
Analysis is carried out in double precision.
"""
from typing import Callable, Sequence, Any

import numpy as np
from scipy.stats import linregress  # type: ignore

# constants

MIN_ERROR = 1e-12


def errors(iterates: Sequence[Any], root: Any) -> np.ndarray:
    """Compute the absolute errors |x_k - root|.
    :param iterates: the sequence of estimates x_0, x_1, ...
    :param root: the (known) root the iterates approach.
    :returns: array of absolute errors.
    """
    return np.array([float(abs(x - root)) for x in iterates], dtype=float)


def error_ratios(iterates: Sequence[Any], root: Any, order: float = 1) -> np.ndarray:
    """Compute the ratios e_{k+1} / e_k^order.
    For the true order of convergence these ratios approach the asymptotic error constant;
    linear convergence gives ratios approaching a constant in (0, 1) with order=1 and
    quadratic convergence gives bounded ratios with order=2.
    :param iterates: the sequence of estimates x_0, x_1, ...
    :param root: the (known) root the iterates approach.
    :param order: (optional) the power applied to the denominator.
    :returns: array with one entry fewer than 'iterates'. Entries with a zero denominator are NaN.
    """
    e = errors(iterates, root)

    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = e[1:] / e[:-1] ** order

    ratios[e[:-1] == 0] = np.nan
    return ratios


def estimate_order(
    iterates: Sequence[Any], root: Any, min_error: float = MIN_ERROR
) -> float:
    """Estimate the order of convergence by fitting log e_{k+1} = p log e_k + log C
    using least squares.
    :param iterates: the sequence of estimates x_0, x_1, ...
    :param root: the (known) root the iterates approach.
    :param min_error: (optional) errors at or below this level are dominated by rounding and ignored.
    :returns: the estimated order p.
    """
    e = errors(iterates, root)
    usable = e > min_error
    pairs = usable[:-1] & usable[1:]

    if np.sum(pairs) < 2:
        raise ValueError(
            "At least two pairs of consecutive errors above min_error are needed to estimate the order!"
        )

    fit = linregress(np.log(e[:-1][pairs]), np.log(e[1:][pairs]))
    return float(fit.slope)


def residuals(obj_fn: Callable, iterates: Sequence[Any]) -> np.ndarray:
    """Evaluate |f(x_k)| along the iterates.
    :param obj_fn: the function whose root was sought.
    :param iterates: the sequence of estimates.
    :returns: array of absolute residuals.
    """
    return np.array([float(abs(obj_fn(x))) for x in iterates], dtype=float)
