"""Multi-commodity flow allocation on a capacitated backbone network."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp
from scipy.sparse import lil_matrix


@dataclass(frozen=True)
class BackboneArc:
    """A directed link ``tail -> head`` with a bandwidth capacity (>= 0)."""

    tail: int
    head: int
    capacity: float


@dataclass(frozen=True)
class FlowDemand:
    """A request to carry up to ``demand`` from ``src`` to ``dst`` at ``price`` per unit."""

    src: int
    dst: int
    demand: float
    price: float


@dataclass(frozen=True)
class FlowOnArc:
    """Flow of demand ``demand_index`` routed on arc ``arc_index``."""

    arc_index: int
    demand_index: int
    flow: float


def _check_node(node: int, num_nodes: int, what: str) -> None:
    if not 0 <= node < num_nodes:
        raise IndexError(f"{what} {node} out of range [0, {num_nodes})")


def best_flow(
    num_nodes: int,
    backbone: Sequence[BackboneArc],
    demands: Sequence[FlowDemand],
) -> list[FlowOnArc]:
    """Route demands to maximise total revenue within the arc capacities."""
    return best_flow_with_penalty(num_nodes, backbone, demands, 1.0, 0.0)


def best_flow_with_penalty(
    num_nodes: int,
    backbone: Sequence[BackboneArc],
    demands: Sequence[FlowDemand],
    max_free_utilization_ratio: float,
    penalty_cost: float,
) -> list[FlowOnArc]:
    """Like :func:`best_flow`, with a penalty for heavily used arcs.

    An arc whose utilisation ``U`` (flow / capacity) exceeds
    ``max_free_utilization_ratio`` costs ``penalty_cost * (U - ratio)``.
    Zero flows are left out of the result.
    """
    if not 0.0 <= max_free_utilization_ratio <= 1.0:
        raise ValueError(
            f"utilization ratio must be in [0, 1], got {max_free_utilization_ratio}"
        )
    for arc in backbone:
        _check_node(arc.tail, num_nodes, "arc tail")
        _check_node(arc.head, num_nodes, "arc head")
    for demand in demands:
        _check_node(demand.src, num_nodes, "demand source")
        _check_node(demand.dst, num_nodes, "demand destination")

    num_arcs = len(backbone)
    num_demands = len(demands)
    num_flow_vars = num_demands * num_arcs
    num_vars = num_flow_vars + num_arcs
    if num_vars == 0:
        return []

    def flow_var(d: int, a: int) -> int:
        return d * num_arcs + a

    lower_bounds = np.zeros(num_vars)
    upper_bounds = np.full(num_vars, np.inf)
    upper_bounds[num_flow_vars:] = 1.0 - max_free_utilization_ratio
    objective = np.zeros(num_vars)
    objective[num_flow_vars:] = -penalty_cost

    num_rows = num_arcs + num_demands * num_nodes
    matrix = lil_matrix((num_rows, num_vars))
    row_lower = np.zeros(num_rows)
    row_upper = np.zeros(num_rows)

    # Capacity with over-utilisation slack:
    # 0 <= sum_d flow[d][a] - capacity * over[a] <= capacity * ratio.
    for a, arc in enumerate(backbone):
        matrix[a, num_flow_vars + a] = -arc.capacity
        for d in range(num_demands):
            matrix[a, flow_var(d, a)] = 1.0
        row_upper[a] = arc.capacity * max_free_utilization_ratio

    out_arcs: list[list[int]] = [[] for _ in range(num_nodes)]
    in_arcs: list[list[int]] = [[] for _ in range(num_nodes)]
    for a, arc in enumerate(backbone):
        out_arcs[arc.tail].append(a)
        in_arcs[arc.head].append(a)

    # Conservation: -demand at dst <= out - in <= demand at src, 0 elsewhere.
    row = num_arcs
    for d, demand in enumerate(demands):
        for node in range(num_nodes):
            row_lower[row] = -demand.demand if node == demand.dst else 0.0
            row_upper[row] = demand.demand if node == demand.src else 0.0
            for a in out_arcs[node]:
                matrix[row, flow_var(d, a)] = 1.0
            for a in in_arcs[node]:
                matrix[row, flow_var(d, a)] = -1.0
            row += 1

    # Revenue is measured as net outflow at each demand's source.
    for d, demand in enumerate(demands):
        for a in out_arcs[demand.src]:
            objective[flow_var(d, a)] = demand.price
        for a in in_arcs[demand.src]:
            objective[flow_var(d, a)] = -demand.price

    result = milp(
        -objective,
        bounds=Bounds(lower_bounds, upper_bounds),
        constraints=LinearConstraint(matrix.tocsr(), row_lower, row_upper),
    )
    if not result.success or result.x is None:
        raise RuntimeError(f"solver failed: {result.message}")

    flows = []
    for d in range(num_demands):
        for a in range(num_arcs):
            value = float(result.x[flow_var(d, a)])
            if value == 0.0:
                continue
            flows.append(FlowOnArc(arc_index=a, demand_index=d, flow=value))
    return flows