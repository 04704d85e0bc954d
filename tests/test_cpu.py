from itertools import accumulate

import pytest

from osalgos.cpu import (
    Process,
    averages,
    format_results,
    main,
    non_preemptive_priority,
    preemptive_sjf,
    round_robin,
)


def _textbook():
    return [Process(1, 6), Process(2, 8), Process(3, 7), Process(4, 3)]


def _staggered():
    return [Process(1, 5, 0, 3), Process(2, 3, 1, 1), Process(3, 8, 2, 2), Process(4, 2, 4, 4)]


ALGORITHMS = [
    preemptive_sjf,
    non_preemptive_priority,
    lambda processes: round_robin(processes, 2),
]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_times_are_consistent(algorithm):
    processes = _staggered()
    results = algorithm(processes)
    assert [r.process for r in results] == processes
    for r in results:
        assert r.turnaround == r.completion - r.process.arrival
        assert r.waiting == r.turnaround - r.process.burst
        assert r.waiting >= 0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_busy_cpu_finishes_at_total_burst(algorithm):
    processes = _textbook()
    results = algorithm(processes)
    assert max(r.completion for r in results) == sum(p.burst for p in processes)
    assert len({r.completion for r in results}) == len(processes)


def test_sjf_textbook_averages():
    assert averages(preemptive_sjf(_textbook())) == (7.0, 13.0)


def test_sjf_runs_shortest_first_when_all_arrive_together():
    results = sorted(preemptive_sjf(_textbook()), key=lambda r: r.completion)
    bursts = [r.process.burst for r in results]
    assert bursts == sorted(bursts)


def test_sjf_preempts_for_shorter_arrival():
    results = preemptive_sjf([Process(1, 5, 0), Process(2, 1, 1)])
    assert results[1].waiting == 0
    assert results[1].completion == results[1].process.arrival + results[1].process.burst


def test_round_robin_with_large_quantum_is_first_come_first_served():
    processes = _textbook()
    results = round_robin(processes, max(p.burst for p in processes))
    assert [r.completion for r in results] == list(accumulate(p.burst for p in processes))


def test_round_robin_rejects_zero_quantum():
    with pytest.raises(ValueError):
        round_robin(_textbook(), 0)


def test_round_robin_waits_for_late_arrival():
    late = Process(2, 3, 10)
    results = round_robin([Process(1, 2, 0), late], 1)
    assert results[1].completion == late.arrival + late.burst


def test_priority_order_when_all_arrive_together():
    processes = [Process(1, 4, 0, 3), Process(2, 2, 0, 1), Process(3, 5, 0, 2)]
    results = sorted(non_preemptive_priority(processes), key=lambda r: r.completion)
    priorities = [r.process.priority for r in results]
    assert priorities == sorted(priorities)


def test_priority_idles_until_arrival():
    late = Process(1, 4, 7, 1)
    results = non_preemptive_priority([late])
    assert results[0].completion == late.arrival + late.burst
    assert results[0].waiting == 0


def test_process_rejects_zero_burst():
    with pytest.raises(ValueError):
        Process(1, 0)


def test_process_rejects_negative_arrival():
    with pytest.raises(ValueError):
        Process(1, 3, -1)


def test_averages_of_nothing():
    with pytest.raises(ValueError):
        averages([])


def test_format_results_table():
    results = preemptive_sjf([Process(1, 6)])
    lines = format_results(results).splitlines()
    assert lines[0] == (
        "Process ID\tBurst Time\tArrival Time\tCompletion Time\tWaiting Time\tTurnaround Time"
    )
    assert lines[1] == "1\t\t6\t\t0\t\t6\t\t0\t\t6"


def test_main_prints_averages(capsys):
    assert main(["sjf", "--burst", "6", "8", "7", "3"]) == 0
    out = capsys.readouterr().out
    assert "Average Waiting Time: 7.00" in out
    assert "Average Turnaround Time: 13.00" in out


def test_main_round_robin_needs_quantum():
    with pytest.raises(SystemExit):
        main(["rr", "--burst", "3", "4"])