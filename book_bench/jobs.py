"""
One file job: read a book line by line, slow-uppercase every line, write it out.

Wall time and CPU time are measured separately: inside a thread pool the wall
time of a CPU-bound job stretches while its CPU time stays flat.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from .errors import JobError
from .transform import slow_uppercase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobReport:
    input_path: Path
    output_path: Path
    line_count: int
    duration: float
    cpu_time: float

    @property
    def label(self) -> str:
        return f"{self.input_path.name} -> {self.output_path.name}"


def transform_lines(src, dst) -> int:
    n = 0
    for line in src:
        dst.write(slow_uppercase(line.rstrip("\n")))
        dst.write("\n")
        n += 1
    return n


def process_file(input_path, output_path) -> JobReport:
    input_path, output_path = Path(input_path), Path(output_path)
    logger.debug("Job start: %s -> %s", input_path, output_path)
    try:
        # Text mode: "\r\n" and "\r" are read back as "\n", and "\n" is written
        # as os.linesep.
        with open(input_path, "r", encoding="utf-8") as src, open(
            output_path, "w", encoding="utf-8"
        ) as dst:
            st_wall = time.perf_counter()
            st_cpu = time.thread_time()
            line_count = transform_lines(src, dst)
            dst.flush()
            et_wall = time.perf_counter()
            et_cpu = time.thread_time()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Job failed: %s -> %s: %s", input_path, output_path, e)
        raise JobError(input_path, output_path, str(e)) from e

    report = JobReport(
        input_path=input_path,
        output_path=output_path,
        line_count=line_count,
        duration=et_wall - st_wall,
        cpu_time=et_cpu - st_cpu,
    )
    logger.debug("Job done: %s, %d lines in %.3fs", report.label, line_count, report.duration)
    return report
