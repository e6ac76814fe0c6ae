
import pytest
import numpy as np
import cachematrix
from cachematrix import cache_solve, make_cache_matrix


class CountingSolver:
    def __init__(self, fn=np.linalg.inv):
        self.fn = fn
        self.calls = 0
        self.last_args = None
        self.last_kwargs = None

    def __call__(self, a, *args, **kwargs):
        self.calls += 1
        self.last_args = args
        self.last_kwargs = kwargs
        return self.fn(a, *args, **kwargs)


def test_concrete_scenario():
    solver = CountingSolver()
    cm = make_cache_matrix([[1, 2], [3, 4]])

    inv1 = cache_solve(cm, solver=solver)
    assert np.allclose(inv1, [[-2, 1], [1.5, -0.5]])
    assert solver.calls == 1

    inv2 = cache_solve(cm, solver=solver)
    assert inv2 is inv1
    assert solver.calls == 1

    cm.set([[2, 0], [0, 2]])
    inv3 = cache_solve(cm, solver=solver)
    assert np.allclose(inv3, [[0.5, 0], [0, 0.5]])
    assert solver.calls == 2
    assert cm.stats == cachematrix.CacheStats(hits=1, misses=2, invalidations=1)


def test_cache_hit_makes_no_solver_call():
    solver = CountingSolver()
    cm = make_cache_matrix(np.random.rand(6, 6) + np.eye(6) * 6.0)

    first = cache_solve(cm, solver=solver)
    for _ in range(5):
        assert cache_solve(cm, solver=solver) is first
    assert solver.calls == 1
    assert cm.stats.hits == 5
    assert cm.stats.misses == 1


def test_set_with_equal_value_still_recomputes():
    solver = CountingSolver()
    m = np.array([[4.0, 1.0], [2.0, 3.0]])
    cm = make_cache_matrix(m)

    first = cache_solve(cm, solver=solver)
    cm.set(m.copy())
    second = cache_solve(cm, solver=solver)

    assert solver.calls == 2
    assert second is not first
    assert np.allclose(first, second)


def test_round_trip_is_identity():
    np.random.seed(42)
    n = 20
    m = np.random.rand(n, n) + np.eye(n) * 2.0
    cm = make_cache_matrix(m)

    r = cache_solve(cm)
    assert np.allclose(m @ r, np.eye(n), atol=1e-10)
    assert np.allclose(r @ m, np.eye(n), atol=1e-10)


def test_default_solver_matches_numpy():
    m = np.array([[3.0, 1.0, 0.0], [1.0, 4.0, 1.0], [0.0, 1.0, 5.0]])
    cm = make_cache_matrix(m)
    np.testing.assert_allclose(cache_solve(cm), np.linalg.inv(m))


def test_non_square_raises_and_leaves_cache_empty():
    cm = make_cache_matrix([[1, 2, 3], [4, 5, 6]])
    assert cm.get_inverse() is None

    with pytest.raises(cachematrix.InversionFailure):
        cache_solve(cm)

    assert cm.get_inverse() is None
    assert cm.stats.misses == 0


def test_singular_raises_and_leaves_cache_empty():
    cm = make_cache_matrix([[1.0, 2.0], [2.0, 4.0]])
    with pytest.raises(np.linalg.LinAlgError):
        cache_solve(cm)
    assert cm.get_inverse() is None


def test_recovers_after_failure():
    cm = make_cache_matrix([[1, 2, 3], [4, 5, 6]])
    with pytest.raises(cachematrix.InversionFailure):
        cache_solve(cm)

    cm.set([[2, 0], [0, 4]])
    assert np.allclose(cache_solve(cm), [[0.5, 0], [0, 0.25]])


def test_solver_error_propagates_unchanged():
    boom = RuntimeError("solver exploded")

    def failing(a):
        raise boom

    cm = make_cache_matrix(np.eye(2))
    with pytest.raises(RuntimeError) as excinfo:
        cache_solve(cm, solver=failing)
    assert excinfo.value is boom
    assert cm.get_inverse() is None


def test_extra_arguments_forwarded_verbatim():
    def scaled_inverse(a, scale, *, shift=0.0):
        return np.linalg.inv(a) * scale + shift

    solver = CountingSolver(scaled_inverse)
    cm = make_cache_matrix(np.eye(2) * 2.0)

    result = cache_solve(cm, 4.0, shift=1.0, solver=solver)
    assert solver.last_args == (4.0,)
    assert solver.last_kwargs == {"shift": 1.0}
    assert np.allclose(result, [[3.0, 1.0], [1.0, 3.0]])


def test_cached_inverse_is_read_only():
    cm = make_cache_matrix(np.eye(2) * 2.0)
    inv = cache_solve(cm)
    assert not inv.flags.writeable
    with pytest.raises(ValueError):
        inv[0, 0] = 0.0


def test_hit_does_not_revalidate_against_matrix():
    cm = make_cache_matrix(np.eye(2))
    planted = np.full((2, 2), 9.0)
    cm.set_inverse(planted)
    assert cache_solve(cm) is planted


def test_instances_are_independent():
    solver = CountingSolver()
    a = make_cache_matrix(np.eye(2) * 2.0)
    b = make_cache_matrix(np.eye(2) * 4.0)

    cache_solve(a, solver=solver)
    cache_solve(b, solver=solver)
    a.set(np.eye(2))

    assert b.get_inverse() is not None
    assert a.get_inverse() is None
    assert solver.calls == 2


def test_custom_solver_buffer_stays_writeable():
    buf = np.empty((2, 2))

    def into_buffer(a):
        buf[...] = np.linalg.inv(a)
        return buf

    cm = make_cache_matrix(np.eye(2) * 2.0)
    inv = cache_solve(cm, solver=into_buffer)

    assert buf.flags.writeable
    assert not inv.flags.writeable
    assert not np.shares_memory(inv, buf)

    # The solver reusing its buffer must not change the cached inverse.
    buf[...] = 0.0
    assert cache_solve(cm, solver=into_buffer) is inv
    assert np.allclose(inv, np.eye(2) * 0.5)
