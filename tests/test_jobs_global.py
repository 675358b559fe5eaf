import pytest

from graphopt.jobs import Resources
from graphopt.jobs_global import (
    best_job_assignment_global_dependencies,
    best_job_assignment_global_exclusive,
)
from graphopt.rng import Random, shuffle

MAX_CPU = 32.0
MAX_RAM = 128.0
MAX_DISK = 10000.0
FACT = 2.0

EXCLUSIVE_EXPECTED = [2, 2, 3, 2, 7, 9, 16, 16, 19, 23]
DEPENDENCY_EXPECTED = [0, 3, 0, 1, 1, 4, 2, 2, 4, 11, 8, 11, 12, 9, 19, 7, 7, 20, 19, 16]


def _random_job(rng):
    return Resources(
        rng.rand_double() * MAX_CPU,
        rng.rand_double() * MAX_RAM,
        rng.rand_double() * MAX_DISK,
    )


def _random_machine(rng):
    return Resources(
        FACT * rng.rand_double() * MAX_CPU,
        FACT * rng.rand_double() * MAX_RAM,
        FACT * rng.rand_double() * MAX_DISK,
    )


def _exclusive_cases():
    rng = Random(123)
    num_jobs = 0
    num_machines = 0
    cases = []
    for _ in range(len(EXCLUSIVE_EXPECTED)):
        num_jobs += rng.uniform(9)
        num_machines += rng.uniform(4)
        jobs = [_random_job(rng) for _ in range(num_jobs)]
        machines = [_random_machine(rng) for _ in range(num_machines)]
        num_exclu = 0 if num_jobs < 2 else rng.uniform(num_jobs)
        exclu = []
        while len(exclu) < num_exclu:
            size = int(rng.rand_exp())
            if size < 2 or size > max(min(num_jobs, 3), num_jobs // 2):
                continue
            all_jobs = list(range(num_jobs))
            shuffle(all_jobs, Random(34))
            exclu.append(all_jobs[:size])
        rng.uniform(1)  # number of dependencies, always zero here
        cases.append((jobs, machines, exclu))
    return cases


def _dependency_cases():
    rng = Random(123)
    num_jobs = 0
    num_machines = 0
    cases = []
    for _ in range(len(DEPENDENCY_EXPECTED)):
        num_jobs += rng.uniform(5)
        num_machines += rng.uniform(2)
        jobs = [_random_job(rng) for _ in range(num_jobs)]
        machines = [_random_machine(rng) for _ in range(num_machines)]
        num_deps = rng.uniform(num_jobs)
        deps = []
        while len(deps) < num_deps:
            a = rng.uniform(num_jobs)
            b = rng.uniform(num_jobs)
            if a == b:
                continue
            deps.append((a, b))
        cases.append((jobs, machines, deps))
    return cases


def _check_capacities(sol, jobs, machines):
    assert len(sol) == len(jobs)
    used = [[0.0, 0.0, 0.0] for _ in machines]
    for job, machine in zip(jobs, sol):
        if machine < 0:
            continue
        assert machine < len(machines)
        used[machine][0] += job.cpu
        used[machine][1] += job.ram
        used[machine][2] += job.disk
    for total, machine in zip(used, machines):
        assert total[0] <= machine.cpu + 1e-6
        assert total[1] <= machine.ram + 1e-6
        assert total[2] <= machine.disk + 1e-6


@pytest.mark.parametrize("index", range(len(EXCLUSIVE_EXPECTED)))
def test_global_exclusive_randomized(index):
    jobs, machines, exclu = _exclusive_cases()[index]
    sol = best_job_assignment_global_exclusive(jobs, machines, exclu)
    _check_capacities(sol, jobs, machines)
    for group in exclu:
        running = [job for job in set(group) if sol[job] != -1]
        assert len(running) <= 1
    assigned = sum(1 for m in sol if m >= 0)
    assert assigned >= EXCLUSIVE_EXPECTED[index] - 1


@pytest.mark.parametrize("index", range(len(DEPENDENCY_EXPECTED)))
def test_global_dependencies_randomized(index):
    jobs, machines, deps = _dependency_cases()[index]
    sol = best_job_assignment_global_dependencies(jobs, machines, deps)
    _check_capacities(sol, jobs, machines)
    for a, b in deps:
        assert (sol[a] >= 0) == (sol[b] >= 0)
    assigned = sum(1 for m in sol if m >= 0)
    assert assigned >= DEPENDENCY_EXPECTED[index] - 1


def test_global_exclusive_blocks_across_machines():
    jobs = [Resources(1.0, 1.0, 1.0), Resources(1.0, 1.0, 1.0)]
    machines = [Resources(5.0, 5.0, 5.0), Resources(5.0, 5.0, 5.0)]
    sol = best_job_assignment_global_exclusive(jobs, machines, [[0, 1]])
    assert sorted(m >= 0 for m in sol) == [False, True]


def test_global_exclusive_without_lists_assigns_all_fitting_jobs():
    jobs = [Resources(1.0, 1.0, 1.0), Resources(1.0, 1.0, 1.0)]
    machines = [Resources(5.0, 5.0, 5.0)]
    assert best_job_assignment_global_exclusive(jobs, machines, []) == [0, 0]


def test_global_dependency_on_unplaceable_job_blocks_both():
    jobs = [Resources(1.0, 1.0, 1.0), Resources(10.0, 10.0, 10.0)]
    machines = [Resources(2.0, 2.0, 2.0)]
    sol = best_job_assignment_global_dependencies(jobs, machines, [(0, 1)])
    assert sol == [-1, -1]


def test_global_dependency_pair_may_use_different_machines():
    jobs = [Resources(2.0, 2.0, 2.0), Resources(2.0, 2.0, 2.0)]
    machines = [Resources(3.0, 3.0, 3.0), Resources(3.0, 3.0, 3.0)]
    sol = best_job_assignment_global_dependencies(jobs, machines, [(0, 1)])
    assert sorted(sol) == [0, 1]


def test_self_dependency_forbids_job():
    jobs = [Resources(1.0, 1.0, 1.0), Resources(1.0, 1.0, 1.0)]
    machines = [Resources(5.0, 5.0, 5.0)]
    sol = best_job_assignment_global_dependencies(jobs, machines, [(0, 0)])
    assert sol == [-1, 0]


def test_out_of_range_job_raises():
    jobs = [Resources(1.0, 1.0, 1.0)]
    machines = [Resources(5.0, 5.0, 5.0)]
    with pytest.raises(IndexError):
        best_job_assignment_global_exclusive(jobs, machines, [[0, 3]])
    with pytest.raises(IndexError):
        best_job_assignment_global_dependencies(jobs, machines, [(0, 2)])


def test_no_machines_leaves_all_unassigned():
    jobs = [Resources(1.0, 1.0, 1.0), Resources(2.0, 2.0, 2.0)]
    assert best_job_assignment_global_exclusive(jobs, [], [[0, 1]]) == [-1, -1]
    assert best_job_assignment_global_dependencies(jobs, [], [(0, 1)]) == [-1, -1]