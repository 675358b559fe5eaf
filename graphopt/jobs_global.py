"""Job assignment with global exclusivity and bidirectional global dependencies."""

from __future__ import annotations

from collections.abc import Sequence

from graphopt.jobs import Resources, _AssignmentModel

__all__ = [
    "best_job_assignment_global_exclusive",
    "best_job_assignment_global_dependencies",
]


def best_job_assignment_global_exclusive(
    jobs: Sequence[Resources],
    machines: Sequence[Resources],
    global_exclusive: Sequence[Sequence[int]],
) -> list[int]:
    """Assign as many jobs as possible, running at most one job of each exclusivity list.

    Two jobs listed together may not both run, even on different machines.
    Element ``i`` of the result is job ``i``'s machine, or ``-1``.
    """
    model = _AssignmentModel(jobs, machines)
    for group in global_exclusive:
        for job in group:
            model.check_job(job)
    for group in global_exclusive:
        model.add_pairs(
            (
                (model.var(job, machine), 1.0)
                for machine in range(model.num_machines)
                for job in group
            ),
            0.0,
            1.0,
        )
    return model.solve()


def best_job_assignment_global_dependencies(
    jobs: Sequence[Resources],
    machines: Sequence[Resources],
    global_dep: Sequence[tuple[int, int]],
) -> list[int]:
    """Assign as many jobs as possible; for each ``(a, b)`` either both run or neither.

    The two jobs of a pair need not share a machine. A pair ``(a, a)`` forbids
    job ``a`` from running at all.
    """
    model = _AssignmentModel(jobs, machines)
    for a, b in global_dep:
        model.check_job(a)
        model.check_job(b)
    for a, b in global_dep:
        pairs: list[tuple[int, float]] = []
        for machine in range(model.num_machines):
            pairs.append((model.var(a, machine), -1.0))
            pairs.append((model.var(b, machine), 1.0))
        model.add_pairs(pairs, 0.0, 0.0)
    return model.solve()