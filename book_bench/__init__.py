from .errors import AcquisitionError, AggregateError, BenchError, JobError
from .jobs import JobReport, process_file
from .runners import RunReport, run_concurrent, run_sequential
from .transform import slow_uppercase

__version__ = "0.1.0"
