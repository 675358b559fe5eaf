"""The cheapest daily menu meeting recommended nutrient intakes (a diet LP)."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp


def cheapest_menu(
    ajr: Sequence[float],
    contributions: Sequence[Sequence[float]],
    prices: Sequence[float],
) -> list[float]:
    """Quantities of each ingredient giving the cheapest menu.

    ``ajr[e]`` is the minimum daily intake of element ``e``;
    ``contributions[i][e]`` is what one unit of ingredient ``i`` provides of
    element ``e``; ``prices[i]`` is the price per unit of ingredient ``i``.
    Returns one non-negative quantity per ingredient, in the order of
    ``prices``. Raises ``ValueError`` on inconsistent input or when no menu
    satisfies the intakes.
    """
    num_elements = len(ajr)
    num_ingredients = len(prices)
    if len(contributions) != num_ingredients:
        raise ValueError(
            f"{len(contributions)} contribution rows for {num_ingredients} prices"
        )
    for index, row in enumerate(contributions):
        if len(row) != num_elements:
            raise ValueError(
                f"ingredient {index} lists {len(row)} elements, expected {num_elements}"
            )
    needs = np.asarray(ajr, dtype=float).reshape(num_elements)
    if num_ingredients == 0:
        if np.any(needs > 0):
            raise ValueError("no ingredients can meet the required intakes")
        return []

    matrix = np.asarray(contributions, dtype=float).reshape(num_ingredients, num_elements)
    constraints = (
        LinearConstraint(matrix.T, needs, np.inf) if num_elements else None
    )
    result = milp(
        np.asarray(prices, dtype=float),
        bounds=Bounds(0.0, np.inf),
        constraints=constraints,
    )
    if result.status == 2:
        raise ValueError("no menu meets the required intakes")
    if result.status == 3:
        raise ValueError("menu cost is unbounded below")
    if not result.success or result.x is None:
        raise RuntimeError(f"solver failed: {result.message}")
    return [float(value) for value in result.x]