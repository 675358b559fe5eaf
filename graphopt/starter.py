"""A minimal linear program: cover symmetric pairs of variables at least cost."""

from __future__ import annotations

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp
from scipy.sparse import lil_matrix


def first_solver(n: int) -> list[float]:
    """Minimise ``x_0 + ... + x_{n-1}`` over ``x >= 0``.

    The constraint is ``x_i + x_j >= 1`` for every ``i`` with ``j = n-1-i``.
    When ``i == j`` (the middle variable of an odd ``n``) the constraint
    reduces to ``x_i >= 1``.
    """
    if n < 0:
        raise ValueError(f"number of variables must be non-negative, got {n}")
    if n == 0:
        return []
    matrix = lil_matrix((n, n))
    for i in range(n):
        matrix[i, i] = 1.0
        matrix[i, n - 1 - i] = 1.0
    result = milp(
        np.ones(n),
        bounds=Bounds(0.0, np.inf),
        constraints=LinearConstraint(matrix.tocsr(), 1.0, np.inf),
    )
    if not result.success or result.x is None:
        raise RuntimeError(f"solver failed: {result.message}")
    return [float(value) for value in result.x]