"""
Tests for root-finding with Newton's method.
"""

import decimal
import unittest
from decimal import Decimal
from fractions import Fraction

import numpy as np
from scipy import optimize  # type: ignore
from parameterized import parameterized_class  # type: ignore

from scalar_roots.root_finding.newton import newton, newton_iterates
from scalar_roots.root_finding.termination_criteria import TOL, MAX_ITERS
from scalar_roots.callbacks import TraceRecorder
from scalar_roots.convergence import error_ratios

TEST_GRID = [{"dtype": float}, {"dtype": np.float64}]


@parameterized_class(TEST_GRID)
class TestNewtonsMethod(unittest.TestCase):
    """Test scalar root-finding with Newton's method."""

    def test_linear_newton(self):
        """Test root-finding on a simple linear function."""

        # simplest possible problem: 1-d linear function
        a = 2.0
        b = -1.0

        def simple_obj(x):
            return a * x + b

        def simple_grad(x):
            return a

        w_newton, exit_status = newton(simple_obj, simple_grad, self.dtype(0.0))

        self.assertTrue(exit_status["success"], "Newton root-finder reported failure!")
        self.assertEqual(
            w_newton, 0.5, "Newton's method should solve linear problems in one step."
        )
        # the second step confirms convergence.
        self.assertEqual(exit_status["iterations"], 2)
        self.assertEqual(exit_status["residual"], 0.0)

    def test_sine_newton(self):
        """Test root-finding on sin(x) started in the basin of pi."""

        w_newton, exit_status = newton(np.sin, np.cos, self.dtype(4.3))

        self.assertTrue(exit_status["success"], "Newton root-finder reported failure!")
        self.assertLess(exit_status["iterations"], MAX_ITERS)
        self.assertTrue(
            np.abs(w_newton - np.pi) <= TOL,
            "Newton method approximation is not close enough to pi.",
        )

        reference = optimize.newton(np.sin, 4.3, fprime=np.cos)
        self.assertTrue(np.allclose(w_newton, reference))

    def test_trace(self):
        """Test that the iteration trace is consistent with the returned estimate."""

        records = list(newton_iterates(np.sin, np.cos, self.dtype(4.3)))
        w_newton, exit_status = newton(np.sin, np.cos, self.dtype(4.3))

        self.assertEqual(len(records), exit_status["iterations"])
        self.assertEqual([r.step for r in records], list(range(1, len(records) + 1)))
        self.assertEqual(records[-1].x, w_newton)
        self.assertEqual(records[0].x_prev, 4.3)

        for prev, curr in zip(records[:-1], records[1:]):
            self.assertEqual(curr.x_prev, prev.x)

        for record in records:
            self.assertEqual(record.fx, np.sin(record.x))

    def test_callback(self):
        """Test that observing the iteration does not change the result."""

        recorder = TraceRecorder()
        w_observed, observed_status = newton(
            np.sin, np.cos, self.dtype(4.3), callback=recorder
        )
        w_newton, exit_status = newton(np.sin, np.cos, self.dtype(4.3))

        self.assertEqual(w_observed, w_newton)
        self.assertEqual(observed_status, exit_status)
        self.assertEqual(len(recorder), exit_status["iterations"])
        self.assertEqual(recorder.iterates[-1], w_newton)

    def test_double_root_newton(self):
        """Test that Newton's method converges only linearly at a double root."""

        recorder = TraceRecorder()
        w_newton, exit_status = newton(
            lambda x: x ** 2, lambda x: 2 * x, self.dtype(1.0), callback=recorder
        )

        # every step halves the iterate, so the tolerance is not met in MAX_ITERS steps.
        self.assertFalse(exit_status["success"])
        self.assertEqual(exit_status["iterations"], MAX_ITERS)
        self.assertEqual(w_newton, 2.0 ** -MAX_ITERS)

        ratios = error_ratios([1.0] + list(recorder.iterates), 0.0)
        self.assertTrue(np.allclose(ratios, 0.5))

    def test_zero_max_iters(self):
        """Test that no steps are taken when 'maxiter' is zero."""

        calls = {"obj": 0, "grad": 0}

        def counted_obj(x):
            calls["obj"] += 1
            return np.sin(x)

        def counted_grad(x):
            calls["grad"] += 1
            return np.cos(x)

        w_newton, exit_status = newton(
            counted_obj, counted_grad, self.dtype(4.3), maxiter=0
        )

        self.assertEqual(w_newton, 4.3)
        self.assertEqual(calls, {"obj": 1, "grad": 0})
        self.assertEqual(exit_status["iterations"], 0)
        self.assertFalse(exit_status["success"])
        self.assertIsNone(exit_status["residual"])

    def test_converged_point_is_stable(self):
        """Test that one more step from a converged estimate stays within tolerance."""

        w_newton, _ = newton(np.sin, np.cos, self.dtype(4.3))
        w_again, exit_status = newton(np.sin, np.cos, w_newton, maxiter=1)

        self.assertTrue(np.abs(w_again - w_newton) <= TOL * (1 + np.abs(w_newton)))
        self.assertTrue(exit_status["success"])


class TestNewtonFaults(unittest.TestCase):
    """Test that arithmetic faults propagate out of Newton's method."""

    def test_zero_derivative_raises(self):
        with self.assertRaises(ZeroDivisionError):
            newton(lambda x: x ** 2, lambda x: 2 * x, 0.0)

    def test_zero_derivative_numpy(self):
        # numpy scalars produce NaN instead of raising; it must reach the caller.
        with np.errstate(all="ignore"):
            w_newton, exit_status = newton(
                lambda x: x ** 2, lambda x: 2 * x, np.float64(0.0)
            )

        self.assertTrue(np.isnan(w_newton))
        self.assertFalse(exit_status["success"])
        self.assertEqual(exit_status["iterations"], 1)

    def test_zero_derivative_decimal(self):
        # exact types signal through their own arithmetic.
        with self.assertRaises(decimal.DivisionByZero):
            newton(lambda x: x * x + 1, lambda x: 2 * x, Decimal(0))

    def test_explicit_dtype(self):
        """Test that iterates use the requested number type."""

        w_newton, exit_status = newton(np.sin, np.cos, 4.3, dtype=np.float32)

        self.assertIsInstance(w_newton, np.float32)
        self.assertTrue(exit_status["success"])
        self.assertTrue(np.abs(w_newton - np.pi) <= 1e-5)

    def test_integer_start(self):
        w_newton, exit_status = newton(lambda x: 2 * x - 1, lambda x: 2, 0)

        self.assertIsInstance(w_newton, float)
        self.assertEqual(w_newton, 0.5)

    def test_fraction_start(self):
        """Test exact iteration with a number type that has no infinity."""

        w_newton, exit_status = newton(
            lambda x: x * x - 2, lambda x: 2 * x, Fraction(1), maxiter=4
        )

        self.assertIsInstance(w_newton, Fraction)
        self.assertEqual(w_newton, Fraction(665857, 470832))
        self.assertEqual(exit_status["iterations"], 4)

    def test_array_start(self):
        """Test that a 0-d array start point iterates in its scalar type."""

        w_newton, exit_status = newton(np.sin, np.cos, np.array(4.3))

        self.assertIsInstance(w_newton, np.float64)
        self.assertTrue(exit_status["success"])
        self.assertTrue(np.abs(w_newton - np.pi) <= TOL)


if __name__ == "__main__":
    unittest.main()
