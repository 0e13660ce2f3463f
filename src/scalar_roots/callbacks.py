"""
Callback functions to be executed after each step of a root-finding iteration.

Every callback is called as `callback(step, x, fx)` and must not influence the iteration.
"""
import logging
from typing import Any, List, Sequence

import numpy as np


class TraceRecorder:

    """Records the iteration trace so that it can be analysed or plotted after the fact.

    Attributes:
        records: list of (step, x, fx) tuples in the order they were observed.
    """

    records: List[tuple]

    def __init__(self):
        self.records = []

    def __call__(self, step: int, x: Any, fx: Any) -> None:
        self.records.append((step, x, fx))

    def __len__(self) -> int:
        return len(self.records)

    @property
    def steps(self) -> np.ndarray:
        return np.array([r[0] for r in self.records], dtype=int)

    @property
    def iterates(self) -> np.ndarray:
        """The estimates x_1, x_2, ... as an array.

        Exact number types (e.g. `Decimal`) are kept by using an object array.
        """
        return _to_array([r[1] for r in self.records])

    @property
    def values(self) -> np.ndarray:
        return _to_array([r[2] for r in self.records])

    def clear(self) -> None:
        self.records = []


class LoggingCallback:

    """Writes one line per step to a logger."""

    def __init__(self, logger: logging.Logger, level: int = logging.DEBUG, name: str = ""):
        """
        :param logger: the logger to write to.
        :param level: (optional) the logging level of the per-step messages.
        :param name: (optional) a prefix identifying the root-finder, e.g. "newton".
        """
        self.logger = logger
        self.level = level
        self.name = name

    def __call__(self, step: int, x: Any, fx: Any) -> None:
        prefix = f"{self.name} " if self.name else ""
        self.logger.log(self.level, f"{prefix}step {step}: x = {x}, f(x) = {fx}")


class CallbackList:

    """Dispatches each step to several callbacks in order."""

    def __init__(self, callbacks: Sequence):
        self.callbacks = [cb for cb in callbacks if cb is not None]

    def __call__(self, step: int, x: Any, fx: Any) -> None:
        for cb in self.callbacks:
            cb(step, x, fx)


def _to_array(values: list) -> np.ndarray:
    if all(isinstance(v, (float, np.floating, int)) for v in values):
        return np.array(values, dtype=float)

    return np.array(values, dtype=object)
