"""
Termination criteria for scalar root-finding iterations.
"""
from typing import Dict, Any

# constants

TOL = 1e-6
MAX_ITERS = 10

CURRENT = "current"
PREVIOUS = "previous"

# classes


class TerminationCriterion:

    """Base class for termination criteria."""

    tol: Any

    def __init__(self, tol: Any = TOL):
        """
        :param tol: the tolerance used to decide that the iteration has converged.
        """
        self.tol = tol

    def __call__(self, x: Any, x_prev: Any) -> bool:
        """Evaluate the termination criterion given the two most recent iterates."""
        raise NotImplementedError("Termination criteria must implement __call__!")

    def should_continue(self, x: Any, x_prev: Any) -> bool:
        """Loop test used by the iterators."""
        return not self(x, x_prev)


class RelativeStepLength(TerminationCriterion):

    """Termination criterion based on the length of the most recent step, relative
    to the magnitude of one of its end-points."""

    relative_to: str

    def __init__(self, tol: Any = TOL, relative_to: str = CURRENT):
        """
        :param tol: the relative tolerance on the step length.
        :param relative_to: (optional) which iterate scales the tolerance, either "current"
            (the newest estimate) or "previous" (the estimate the step started from).
        """
        super().__init__(tol)

        if relative_to not in [CURRENT, PREVIOUS]:
            raise ValueError(f"Step length cannot be taken relative to {relative_to}!")

        self.relative_to = relative_to

    def _threshold(self, x: Any, x_prev: Any) -> Any:
        ref = x if self.relative_to == CURRENT else x_prev
        return self.tol * (1 + abs(ref))

    def __call__(self, x: Any, x_prev: Any) -> bool:
        """Determine if the step from 'x_prev' to 'x' is small enough (according to self.tol)
        to deduce that the method has converged. Steps to or from an infinite iterate never converge.
        """
        step = abs(x - x_prev)
        return step <= self._threshold(x, x_prev) and step < float("inf")

    def should_continue(self, x: Any, x_prev: Any) -> bool:
        """Continue only while the step is strictly longer than the tolerance.
        A NaN step stops the iteration without counting as convergence.
        """
        return abs(x - x_prev) > self._threshold(x, x_prev)


# index


def get_criterion(config: Dict[str, Any]) -> TerminationCriterion:
    """Load a termination criterion by name using the passed configuration parameters.
    :param config: configuration object specifying the termination criterion.
    :returns: an instance of TerminationCriterion which can be used to determine if a root-finder has converged.
    """
    name = config.get("name", None)

    if name is None:
        raise ValueError("Termination criterion must have name!")
    elif name == "relative_step_length":
        return RelativeStepLength(
            config.get("tol", TOL), config.get("relative_to", CURRENT)
        )
    else:
        raise ValueError(f"Termination criterion {name} not recognized!")
