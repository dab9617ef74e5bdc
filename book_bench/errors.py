class BenchError(Exception):
    pass


class AcquisitionError(BenchError):
    def __init__(self, url: str, dest, reason: str):
        super().__init__(f"Failed to fetch {url} -> {dest}: {reason}")
        self.url = url
        self.dest = dest
        self.reason = reason

    def __reduce__(self):
        return (type(self), (self.url, self.dest, self.reason))


class JobError(BenchError, OSError):
    """A file job could not read its input or write its output."""

    def __init__(self, input_path, output_path, reason: str):
        super().__init__(f"Failed to process {input_path} -> {output_path}: {reason}")
        self.input_path = input_path
        self.output_path = output_path
        self.reason = reason

    # Jobs run in worker processes, the error has to survive pickling.
    def __reduce__(self):
        return (type(self), (self.input_path, self.output_path, self.reason))


class AggregateError(BenchError):
    """
    Raised by the concurrent runner once every job has finished and at least
    one of them failed. `errors` keeps submission order and `error` is the
    first-submitted failure.
    """

    def __init__(self, errors: list[BaseException]):
        if not errors:
            raise ValueError("AggregateError needs at least one error")
        self.errors = tuple(errors)
        self.error = self.errors[0]
        super().__init__(f"{len(self.errors)} of the concurrent jobs failed, first: {self.error}")
