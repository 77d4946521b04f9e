import itertools
import random

import pytest

from algokit.two_sat import TwoSat, assign_with_parity


def satisfies(assignment, clauses):
    return all(assignment[a] == av or assignment[b] == bv for a, av, b, bv in clauses)


def test_or_solution_satisfies_clauses():
    clauses = [(0, True, 1, False), (1, True, 2, True), (0, False, 2, False)]
    sat = TwoSat(3)
    for clause in clauses:
        sat.add_or(*clause)
    result = sat.solve()
    assert len(result) == 3
    assert result[0] is True or result[1] is False
    assert result[1] is True or result[2] is True
    assert result[0] is False or result[2] is False


def test_contradiction_is_unsatisfiable():
    sat = TwoSat(1)
    sat.add_or(0, True, 0, True)
    sat.add_or(0, False, 0, False)
    assert sat.solve() is None


def test_forced_value():
    sat = TwoSat(2)
    sat.add_or(1, False, 1, False)
    assert sat.solve()[1] is False


def test_xor_gives_different_values():
    sat = TwoSat(2)
    sat.add_xor(0, True, 1, True)
    result = sat.solve()
    assert result[0] != result[1]


def test_implication_is_followed():
    sat = TwoSat(2)
    sat.add_implication(0, True, 1, False)
    sat.add_or(0, True, 0, True)
    result = sat.solve()
    assert result[0] is True and result[1] is False


def test_random_instances_match_brute_force():
    rng = random.Random(7)
    for _ in range(200):
        variables = rng.randint(1, 4)
        clauses = [
            (rng.randrange(variables), rng.random() < 0.5,
             rng.randrange(variables), rng.random() < 0.5)
            for _ in range(rng.randint(1, 8))
        ]
        sat = TwoSat(variables)
        for clause in clauses:
            sat.add_or(*clause)
        result = sat.solve()
        possible = any(
            satisfies(bits, clauses)
            for bits in itertools.product([False, True], repeat=variables)
        )
        assert (result is not None) == possible
        if result is not None:
            assert satisfies(result, clauses)


def test_variable_out_of_range():
    with pytest.raises(IndexError):
        TwoSat(2).add_or(2, True, 0, True)


def test_parity_assignment_is_consistent():
    constraints = [(1, 2, 1), (2, 3, 0), (3, 4, 0), (4, 5, 1)]
    chosen = set(assign_with_parity(5, constraints))
    for u, v, same in constraints:
        assert ((u in chosen) == (v in chosen)) == bool(same)


def test_parity_odd_cycle_impossible():
    assert assign_with_parity(3, [(1, 2, 0), (2, 3, 0), (1, 3, 0)]) is None


def test_parity_bad_vertex():
    with pytest.raises(ValueError):
        assign_with_parity(2, [(1, 3, 1)])