import threading
from typing import Protocol

from tabulate import tabulate

from .jobs import JobReport


class Reporter(Protocol):
    def emit(self, label: str, duration: float) -> None: ...

    def emit_job(self, report: JobReport) -> None: ...


class NullReporter:
    def emit(self, label: str, duration: float) -> None:
        pass

    def emit_job(self, report: JobReport) -> None:
        pass


class ConsoleReporter:
    """
    Prints in the same shape as:

    Processed book1.txt    -> book1_SINGLE.txt in 9.312 seconds
    Processed book2.txt    -> book2_SINGLE.txt in 4.871 seconds
    Single-thread total: 14.183 seconds
    """

    def __init__(self, file=None):
        self.file = file
        # Job reports of the concurrent runner arrive from pool threads.
        self._lock = threading.Lock()

    def _print(self, msg: str) -> None:
        with self._lock:
            print(msg, file=self.file, flush=True)

    def emit(self, label: str, duration: float) -> None:
        self._print(f"{label} total: {duration:.3f} seconds")

    def emit_job(self, report: JobReport) -> None:
        self._print(
            f"Processed {report.input_path.name:<12} -> {report.output_path.name:<16} "
            f"in {report.duration:.3f} seconds"
        )


def summary_table(runs) -> str:
    runs = list(runs)
    if not runs:
        return ""
    baseline = runs[0].duration
    rows = []
    for run in runs:
        cpu = sum(job.cpu_time for job in run.jobs)
        speedup = baseline / run.duration if run.duration > 0 else float("inf")
        rows.append([run.label, run.duration, cpu, speedup])
    return tabulate(
        rows,
        headers=["run", "wall (s)", "cpu (s)", "speedup"],
        floatfmt=(".3f", ".3f", ".3f", ".2f"),
    )
