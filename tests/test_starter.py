import pytest

from graphopt.starter import first_solver


@pytest.mark.parametrize("n, optimum", [(4, 2.0), (5, 3.0), (8, 4.0)])
def test_optimal_sum(n, optimum):
    solution = first_solver(n)
    assert len(solution) == n
    assert sum(solution) == pytest.approx(optimum, abs=1e-6)


@pytest.mark.parametrize("n", [4, 5, 8])
def test_constraints_hold(n):
    solution = first_solver(n)
    for i, value in enumerate(solution):
        assert value >= -1e-9
        j = n - 1 - i
        if i == j:
            assert value >= 1 - 1e-6
        else:
            assert value + solution[j] >= 1 - 1e-6


def test_zero_variables():
    assert first_solver(0) == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        first_solver(-1)