"""Exception classes for root finding."""


class RootFinderError(Exception):
    """Base class for every failure raised by a root finder."""

    def _payload(self):
        return ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self):
        return hash((type(self).__name__, self._payload()))


class InvalidEndpoints(RootFinderError, ValueError):
    """Starting points do not straddle a sign change of f."""

    def __init__(self, fa=None, fb=None):
        self.fa = fa
        self.fb = fb
        super().__init__(
            f"Function values at starting points must have opposite signs: "
            f"f(a)={fa}, f(b)={fb}"
        )

    # f values are diagnostics only; any two InvalidEndpoints compare equal
    def _payload(self):
        return ()


class InvalidTolerance(RootFinderError, ValueError):
    def __init__(self, tol):
        self.tol = tol
        super().__init__(f"Tolerance must be > 0, got {tol}")

    def _payload(self):
        return (self.tol,)


class ZeroDerivative(RootFinderError, ArithmeticError):
    """Newton step hit an exactly-zero derivative.

    `best_approximation` is the last accepted iterate, which callers may keep
    or use to reseed another method.
    """

    def __init__(self, best_approximation):
        self.best_approximation = best_approximation
        super().__init__(
            f"Derivative vanished; best approximation so far is {best_approximation}"
        )

    def _payload(self):
        return (self.best_approximation,)
