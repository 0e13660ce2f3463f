"""
Convenience functions for configuring and running root-finders.
"""
import logging
import math
from functools import partial
from typing import Callable, Dict, Any, Optional, Tuple

from scalar_roots.callbacks import CallbackList, LoggingCallback
from scalar_roots.dtypes import DType
from scalar_roots.root_finding import newton, secant, TOL, MAX_ITERS

# Constants #

NEWTON = "newton"
SECANT = "secant"

# exposed methods
METHODS = [NEWTON, SECANT]

# ========================
# ==== Logging Helper ====
# ========================

def _get_logger(
    name: str, verbose: bool = False, debug: bool = False, log_file: str = None
) -> logging.Logger:
    """Construct a logging.Logger instance with an appropriate configuration.
    :param name: name for the Logger instance.
    :param verbose: (optional) whether or not the logger should print verbosely (ie. at the INFO level).
        Defaults to False.
    :param debug: (optional) whether or not the logger should print in debug mode (ie. at the DEBUG level).
        Defaults to False.
    :param log_file: (optional) path to a file where the log should be stored. The log is printed to stderr when 'None'.
    :returns: instance of logging.Logger.
    """

    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logging.basicConfig(level=level, filename=log_file)
    logger = logging.getLogger(name)
    logging.root.setLevel(level)
    logger.setLevel(level)
    return logger

# ===========================
# ==== Root-Finder Index ====
# ===========================

def get_root_finder(config: Dict[str, Any]) -> Callable:
    """Load a root-finder by name using the passed configuration parameters.
    :param config: configuration object specifying the root-finder, e.g. {"name": "secant", "tol": 1e-8}.
    :returns: the root-finding function with 'tol' and 'maxiter' bound to the configured values.
    """
    name = config.get("name", None)
    tol = config.get("tol", TOL)
    maxiter = config.get("maxiter", MAX_ITERS)

    if name is None:
        raise ValueError("Root-finding method must have name!")
    elif name == NEWTON:
        return partial(newton, tol=tol, maxiter=maxiter)
    elif name == SECANT:
        return partial(secant, tol=tol, maxiter=maxiter)
    else:
        raise ValueError(f"Root-finding method {name} not recognized!")

# =====================
# ==== Entry Point ====
# =====================

def find_root(
    obj_fn: Callable,
    x0: Any,
    x1: Optional[Any] = None,
    grad_fn: Optional[Callable] = None,
    method: Optional[str] = None,
    tol: float = TOL,
    maxiter: int = MAX_ITERS,
    callback: Optional[Callable] = None,
    dtype: Optional[DType] = None,
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> Tuple[Any, Dict[str, Any]]:
    """Find a root of the scalar function 'obj_fn'.

    Newton's method is used when the derivative 'grad_fn' is supplied and the
    secant method otherwise, unless 'method' says differently.

    :param obj_fn: a function that returns the objective when called at x.
    :param x0: initial guess for the root.
    :param x1: (optional) second initial guess; required by the secant method.
    :param grad_fn: (optional) derivative of 'obj_fn'; required by Newton's method.
    :param method: (optional) one of METHODS.
    :param tol: (optional) relative tolerance on the step length.
    :param maxiter: (optional) the maximum number of iterations to run.
    :param callback: (optional) an observer called as callback(step, x, f(x)) after each step.
    :param dtype: (optional) the number type used for the iterates.
    :param verbose: (optional) log at the INFO level.
    :param debug: (optional) log every step at the DEBUG level.
    :param log_file: (optional) path to a file where the log should be stored.
    :param logger: (optional) a logging instance to use.
    :returns: (x, exit_status) -- the final estimate of the root and status of the root-finder.
    """
    if logger is None:
        logger = _get_logger("scalar_roots", verbose, debug, log_file)

    if method is None:
        method = NEWTON if grad_fn is not None else SECANT

    root_finder = get_root_finder({"name": method, "tol": tol, "maxiter": maxiter})
    step_logger = LoggingCallback(logger, logging.DEBUG, name=method)
    callback = CallbackList([step_logger, callback])

    if method == NEWTON:
        if grad_fn is None:
            raise ValueError("Newton's method requires the derivative 'grad_fn'!")

        logger.info(f"Running Newton's method from x0 = {x0}.")
        x, exit_status = root_finder(obj_fn, grad_fn, x0, callback=callback, dtype=dtype)
    else:
        if x1 is None:
            raise ValueError("The secant method requires a second starting point 'x1'!")

        logger.info(f"Running the secant method from x0 = {x0}, x1 = {x1}.")
        x, exit_status = root_finder(obj_fn, x0, x1, callback=callback, dtype=dtype)

    if exit_status["success"]:
        logger.info(
            f"Converged to x = {x} after {exit_status['iterations']} iterations."
        )
    elif not math.isfinite(x):
        logger.warning(
            f"{method} stopped after {exit_status['iterations']} iterations "
            f"with a non-finite estimate x = {x}."
        )
    else:
        logger.warning(
            f"{method} did not converge within {exit_status['iterations']} iterations. "
            f"Final estimate x = {x}, f(x) = {exit_status['residual']}."
        )

    return x, exit_status
