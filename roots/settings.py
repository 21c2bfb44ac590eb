from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RootSettings:
    tol: Any = 1e-10      # convergence threshold on successive-iterate error
    maxiter: int = 100    # hard bound on refinement steps
