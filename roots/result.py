from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class RootResult:
    root: Any
    iterates: List[Any] = field(default_factory=list)   # seeds first, then one per step
    errors: List[Any] = field(default_factory=list)     # one per refinement step
    method: str = ""
    tolerance: Any = None

    @property
    def n_iter(self) -> int:
        return len(self.errors)

    @property
    def n_seeds(self) -> int:
        return len(self.iterates) - len(self.errors)

    @property
    def final_error(self):
        return self.errors[-1] if self.errors else None

    @property
    def converged(self) -> bool:
        """
        Whether the last step met the tolerance.

        Running out of iterations is not an error; check this flag to tell
        a converged root from a best-effort one.
        """
        if self.final_error is None or self.tolerance is None:
            return False
        return self.final_error <= self.tolerance

    def to_frame(self) -> pd.DataFrame:
        """Convergence history, one row per iterate. Seed rows have NaN error."""
        seed_errors = [np.nan] * self.n_seeds
        df = pd.DataFrame({
            'x': [float(x) for x in self.iterates],
            'error': seed_errors + [float(e) for e in self.errors],
        })
        df['seed'] = df.index < self.n_seeds
        df.index.name = 'iteration'
        return df
