import queue as std_queue

import pytest

from ferrule.lessons.threads import (
    JobStatus,
    Queue,
    offset_sums,
    receive_all,
    run_jobs,
    run_workers,
    send_tx,
)


def test_run_workers_joins_all(capsys):
    assert run_workers(5, 0) == 5
    out = capsys.readouterr().out
    assert "thread 0 is complete" in out
    assert "thread 4 is complete" in out


def test_run_jobs_counts_every_job(capsys):
    status = run_jobs(7, 0)
    assert status == JobStatus(jobs_completed=7)
    assert "jobs completed" in capsys.readouterr().out


def test_send_tx_sends_both_halves():
    channel = std_queue.Queue()
    for thread in send_tx(Queue(), channel, 0):
        thread.join()
    values = []
    while not channel.empty():
        values.append(channel.get())
    assert sorted(values) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_receive_all_gets_every_number(capsys):
    received = receive_all(Queue(), 0)
    assert sorted(received) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert "total numbers received: 10" in capsys.readouterr().out


def test_receive_all_rejects_wrong_length():
    with pytest.raises(RuntimeError):
        receive_all(Queue(length=11), 0)


def test_offset_sums_partition_total():
    sums = offset_sums(range(100), 8)
    assert len(sums) == 8
    assert sum(sums) == sum(range(100))


def test_offset_sums_one_number_per_offset():
    assert offset_sums(range(8), 8) == list(range(8))