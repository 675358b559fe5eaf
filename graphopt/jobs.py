"""Assigning jobs to machines under CPU, RAM and disk limits (0-1 integer programs)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp
from scipy.sparse import lil_matrix


@dataclass(frozen=True)
class Resources:
    """Amounts of CPU, RAM and disk, used by a job or offered by a machine."""

    cpu: float
    ram: float
    disk: float

    def _values(self) -> tuple[float, float, float]:
        return (self.cpu, self.ram, self.disk)


class _AssignmentModel:
    """0-1 model where ``x[i][j] == 1`` means job ``i`` runs on machine ``j``.

    The objective is the number of assigned jobs. Each job runs at most once
    and the jobs on a machine never use more resources than it has.
    """

    def __init__(self, jobs: Sequence[Resources], machines: Sequence[Resources]) -> None:
        self.jobs = list(jobs)
        self.machines = list(machines)
        self.num_jobs = len(self.jobs)
        self.num_machines = len(self.machines)
        self._rows: list[tuple[dict[int, float], float, float]] = []

        for i in range(self.num_jobs):
            self.add_row({self.var(i, j): 1.0 for j in range(self.num_machines)}, 0.0, 1.0)
        for j, machine in enumerate(self.machines):
            for res, capacity in enumerate(machine._values()):
                coefficients = {
                    self.var(i, j): job._values()[res] for i, job in enumerate(self.jobs)
                }
                self.add_row(coefficients, 0.0, capacity)

    def check_job(self, job: int) -> None:
        if not 0 <= job < self.num_jobs:
            raise IndexError(f"job {job} out of range [0, {self.num_jobs})")

    def var(self, job: int, machine: int) -> int:
        return job * self.num_machines + machine

    def add_row(self, coefficients: dict[int, float], lower: float, upper: float) -> None:
        self._rows.append((coefficients, lower, upper))

    def add_pairs(
        self, pairs: Iterable[tuple[int, float]], lower: float, upper: float
    ) -> None:
        """Add a row from (variable, coefficient) pairs; later pairs overwrite earlier ones."""
        coefficients: dict[int, float] = {}
        for index, value in pairs:
            coefficients[index] = value
        self.add_row(coefficients, lower, upper)

    def solve(self) -> list[int]:
        assignment = [-1] * self.num_jobs
        num_vars = self.num_jobs * self.num_machines
        if num_vars == 0:
            return assignment
        matrix = lil_matrix((len(self._rows), num_vars))
        lower = np.empty(len(self._rows))
        upper = np.empty(len(self._rows))
        for row, (coefficients, lo, hi) in enumerate(self._rows):
            for index, value in coefficients.items():
                matrix[row, index] = value
            lower[row] = lo
            upper[row] = hi
        result = milp(
            -np.ones(num_vars),
            integrality=np.ones(num_vars),
            bounds=Bounds(0.0, 1.0),
            constraints=LinearConstraint(matrix.tocsr(), lower, upper),
        )
        if not result.success or result.x is None:
            raise RuntimeError(f"solver failed: {result.message}")
        for i in range(self.num_jobs):
            for j in range(self.num_machines):
                if result.x[self.var(i, j)] > 0.5:
                    if assignment[i] != -1:
                        raise RuntimeError(
                            f"job {i} assigned to machines {assignment[i]} and {j}"
                        )
                    assignment[i] = j
        return assignment


def best_job_assignment(
    jobs: Sequence[Resources], machines: Sequence[Resources]
) -> list[int]:
    """Assign as many jobs as possible; element ``i`` is job ``i``'s machine or ``-1``."""
    return _AssignmentModel(jobs, machines).solve()


def best_job_assignment_local_exclusive(
    jobs: Sequence[Resources],
    machines: Sequence[Resources],
    local_exclusive: Sequence[Sequence[int]],
) -> list[int]:
    """Like :func:`best_job_assignment`; jobs of one exclusivity list never share a machine."""
    model = _AssignmentModel(jobs, machines)
    for group in local_exclusive:
        for job in group:
            model.check_job(job)
    for j in range(model.num_machines):
        for group in local_exclusive:
            model.add_pairs(((model.var(i, j), 1.0) for i in group), 0.0, 1.0)
    return model.solve()


def best_job_assignment_local_dependencies(
    jobs: Sequence[Resources],
    machines: Sequence[Resources],
    local_dep: Sequence[tuple[int, int]],
) -> list[int]:
    """Like :func:`best_job_assignment`; for each ``(a, b)``, if ``a`` runs then ``b``
    runs on the same machine."""
    model = _AssignmentModel(jobs, machines)
    for a, b in local_dep:
        model.check_job(a)
        model.check_job(b)
    for j in range(model.num_machines):
        for a, b in local_dep:
            model.add_pairs(
                [(model.var(a, j), -1.0), (model.var(b, j), 1.0)], 0.0, np.inf
            )
    return model.solve()