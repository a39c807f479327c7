from sortcraft.benchmark import stress_test_sort
from sortcraft.compare import greater


def _recorder():
    calls = []

    def sort(values, *args):
        calls.append((list(values), args))
        return sorted(values)

    return calls, sort


def test_runs_sort_the_requested_number_of_times():
    calls, sort = _recorder()
    elapsed = stress_test_sort([3, 1, 2], 5, sort)
    assert len(calls) == 5
    assert elapsed >= 0


def test_passes_extra_arguments_through():
    calls, sort = _recorder()
    elapsed = stress_test_sort([2, 1], 2, sort, greater)
    assert calls == [([2, 1], (greater,)), ([2, 1], (greater,))]
    assert elapsed >= 0


def test_zero_times_never_calls_sort():
    calls, sort = _recorder()
    elapsed = stress_test_sort([1], 0, sort)
    assert calls == []
    assert elapsed >= 0


def test_input_is_not_mutated():
    data = [5, 4, 3]
    stress_test_sort(data, 3, lambda v: v.sort())
    assert data == [3, 4, 5]