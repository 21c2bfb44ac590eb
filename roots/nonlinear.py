from __future__ import annotations
import logging
from dataclasses import replace
from typing import Generic, List

from custom_types.types import R, RealFunc
from roots.errors import InvalidEndpoints, InvalidTolerance, ZeroDerivative
from roots.result import RootResult
from roots.settings import RootSettings

logger = logging.getLogger(__name__)


class RootFinder(Generic[R]):
    """
    Iterative root finders for scalar functions f(x) = 0.

    All four methods share one loop policy: run while the last error is above
    the tolerance and fewer than maxiter steps have been taken. The entry
    error is tol + 1 so at least one step always runs. Hitting maxiter is not
    an error; see RootResult.converged.

    Works with any real type that supports ordering, abs() and arithmetic
    (float, numpy scalars, Fraction, Decimal).
    """

    def __init__(self, s: RootSettings = RootSettings()):
        self.s = s

    @classmethod
    def from_values(cls, tol, maxiter: int) -> "RootFinder":
        return cls(RootSettings(tol=tol, maxiter=maxiter))

    @property
    def tolerance(self):
        return self.s.tol

    @property
    def max_iterations(self) -> int:
        return self.s.maxiter

    def set_tolerance(self, tol) -> None:
        self.s = replace(self.s, tol=tol)

    def set_max_iterations(self, maxiter: int) -> None:
        self.s = replace(self.s, maxiter=maxiter)

    # ========== Root finders ==========

    def bisect(self, f: RealFunc, a: R, b: R) -> RootResult:
        """Bisection on the bracket [a, b]. Error is half the bracket width."""
        tol, maxiter = self.s.tol, self.s.maxiter
        self._check_straddle(f(a), f(b), "bisect")
        self._check_tolerance(tol, "bisect")
        if maxiter < 1:
            # no seed point, so there would be nothing to report as the root
            raise ValueError(f"bisect needs maxiter >= 1, got {maxiter}")

        n_iter = 0
        err = tol + 1
        xvect: List[R] = []
        xdiff: List[R] = []
        inf, sup = a, b

        while err > tol and n_iter < maxiter:
            n_iter += 1
            x = (inf + sup) / 2
            fx = f(x)
            xvect.append(x)
            if self._straddles(fx, f(inf)):
                sup = x
            else:
                inf = x
            err = abs(sup - inf) / 2
            xdiff.append(err)

        return self._finish("bisect", xvect, xdiff, tol)

    def chord(self, f: RealFunc, a: R, b: R, x0: R) -> RootResult:
        """
        Fixed-slope iteration from x0.

        The slope is the secant of f over [a, b], computed once. Converges
        linearly at best; the bracket is not re-checked while iterating.
        """
        tol, maxiter = self.s.tol, self.s.maxiter
        fa, fb = f(a), f(b)
        self._check_straddle(fa, fb, "chord")
        self._check_tolerance(tol, "chord")

        r = (fb - fa) / (b - a)
        n_iter = 0
        err = tol + 1
        xvect: List[R] = [x0]
        xdiff: List[R] = []
        x_curr = x0
        fx = f(x0)

        while err > tol and n_iter < maxiter:
            n_iter += 1
            x = x_curr - fx / r
            fx = f(x)
            err = abs(x - x_curr)
            xdiff.append(err)
            xvect.append(x)
            x_curr = x

        return self._finish("chord", xvect, xdiff, tol)

    def secant(self, f: RealFunc, x0: R, x1: R) -> RootResult:
        """
        Two-point secant iteration.

        x0 is the current point and x1 the previous one; iterates start with
        [x1, x0]. A zero denominator is not guarded: Python floats raise
        ZeroDivisionError, numpy scalars produce inf/nan.
        """
        tol, maxiter = self.s.tol, self.s.maxiter
        fx0, fx1 = f(x0), f(x1)
        self._check_straddle(fx0, fx1, "secant")
        self._check_tolerance(tol, "secant")

        n_iter = 0
        err = tol + 1
        xvect: List[R] = [x1, x0]
        xdiff: List[R] = []

        while err > tol and n_iter < maxiter:
            n_iter += 1
            x = x0 - fx0 * (x0 - x1) / (fx0 - fx1)
            fx = f(x)
            xvect.append(x)
            err = abs(x0 - x)
            xdiff.append(err)
            x1, fx1 = x0, fx0
            x0, fx0 = x, fx

        return self._finish("secant", xvect, xdiff, tol)

    def newton(self, f: RealFunc, df: RealFunc, x0: R) -> RootResult:
        """
        Newton-Raphson from x0 with derivative df.

        Raises ZeroDerivative carrying the last accepted iterate if df is
        exactly zero at the current point.
        """
        tol, maxiter = self.s.tol, self.s.maxiter
        self._check_tolerance(tol, "newton")

        n_iter = 0
        err = tol + 1
        xvect: List[R] = [x0]
        xdiff: List[R] = []
        x_curr = x0
        fx = f(x0)

        while err > tol and n_iter < maxiter:
            dfx = df(x_curr)
            if dfx == 0:
                logger.debug("newton: zero derivative at x=%s after %d steps", x_curr, n_iter)
                raise ZeroDerivative(xvect[-1])
            x = x_curr - fx / dfx
            err = abs(x - x_curr)
            xdiff.append(err)
            x_curr = x
            fx = f(x_curr)
            n_iter += 1
            xvect.append(x_curr)

        return self._finish("newton", xvect, xdiff, tol)

    # ========== Helpers ==========

    @staticmethod
    def _straddles(fa, fb) -> bool:
        return fa * fb < 0

    def _check_straddle(self, fa, fb, method: str) -> None:
        if not self._straddles(fa, fb):
            logger.debug("%s: no sign change, f(a)=%s f(b)=%s", method, fa, fb)
            raise InvalidEndpoints(fa, fb)

    @staticmethod
    def _check_tolerance(tol, method: str) -> None:
        if not tol > 0:
            logger.debug("%s: rejected tolerance %s", method, tol)
            raise InvalidTolerance(tol)

    @staticmethod
    def _finish(method: str, xvect: List, xdiff: List, tol) -> RootResult:
        result = RootResult(root=xvect[-1], iterates=xvect, errors=xdiff,
                            method=method, tolerance=tol)
        if result.n_iter and not result.converged:
            logger.info("%s: stopped after %d iterations with error %s > tol %s",
                        method, result.n_iter, result.final_error, tol)
        else:
            logger.debug("%s: root %s after %d iterations", method, result.root, result.n_iter)
        return result
