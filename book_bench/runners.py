"""
Two ways to run the same pair of file jobs.

run_sequential: book1 then book2 on the calling thread.
run_concurrent: both books at once on a pool of exactly two workers.

ThreadPoolExecutor gives concurrency but no parallelism for this CPU-bound
workload, so the thread pool total is about the sequential total. The process
pool gets real parallelism and its total is about the longest job.
"""

import concurrent.futures
import logging
import time
from dataclasses import dataclass

from .errors import AggregateError
from .jobs import JobReport, process_file
from .report import NullReporter, Reporter

logger = logging.getLogger(__name__)

WORKER_COUNT = 2

EXECUTORS = {
    "process": (concurrent.futures.ProcessPoolExecutor, "Multi-process"),
    "thread": (concurrent.futures.ThreadPoolExecutor, "Multi-thread"),
}

SINGLE_LABEL = "Single-thread"


@dataclass(frozen=True)
class RunReport:
    label: str
    duration: float
    jobs: tuple[JobReport, ...]


def run_sequential(pairs, reporter: Reporter | None = None) -> RunReport:
    reporter = reporter or NullReporter()
    jobs = []
    st = time.perf_counter()
    for input_path, output_path in pairs:
        # A failing job propagates as is, the remaining jobs never start.
        report = process_file(input_path, output_path)
        reporter.emit_job(report)
        jobs.append(report)
    et = time.perf_counter()

    run = RunReport(label=SINGLE_LABEL, duration=et - st, jobs=tuple(jobs))
    reporter.emit(run.label, run.duration)
    return run


def _emit_when_done(reporter: Reporter):
    def callback(fut: concurrent.futures.Future):
        if fut.exception() is None:
            reporter.emit_job(fut.result())

    return callback


def run_concurrent(pairs, reporter: Reporter | None = None, executor: str = "process") -> RunReport:
    pairs = list(pairs)
    if len(pairs) != WORKER_COUNT:
        raise ValueError(f"run_concurrent takes exactly {WORKER_COUNT} pairs, got {len(pairs)}")
    if executor not in EXECUTORS:
        raise ValueError(f"Unknown executor {executor!r}, expected one of {sorted(EXECUTORS)}")
    executor_cls, label = EXECUTORS[executor]
    reporter = reporter or NullReporter()

    st = time.perf_counter()
    with executor_cls(max_workers=WORKER_COUNT) as pool:
        futs = [pool.submit(process_file, input_path, output_path) for input_path, output_path in pairs]
        for fut in futs:
            fut.add_done_callback(_emit_when_done(reporter))
        # Join barrier: no result and no error is reported before both jobs finish.
        concurrent.futures.wait(futs, return_when=concurrent.futures.ALL_COMPLETED)
        et = time.perf_counter()
    # Leaving the pool joins its threads, so every done-callback has run.

    errors = [fut.exception() for fut in futs if fut.exception() is not None]
    if errors:
        logger.error("%d of %d concurrent jobs failed", len(errors), len(futs))
        raise AggregateError(errors) from errors[0]

    run = RunReport(label=label, duration=et - st, jobs=tuple(fut.result() for fut in futs))
    reporter.emit(run.label, run.duration)
    return run
