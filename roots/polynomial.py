from roots.settings import RootSettings


class PolynomialRootFinder:
    """Placeholder for polynomial-specific finders. Holds settings only."""

    def __init__(self, s: RootSettings = RootSettings()):
        self.s = s
