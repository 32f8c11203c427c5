"""
Exceptions raised by the benchmark harness.
"""

import errno
from typing import Optional

import torch


# errno values that mean the process ran out of something it cannot get back
_EXHAUSTION_ERRNOS = frozenset({errno.ENOMEM, errno.EMFILE, errno.ENFILE, errno.ENOSPC})


class BenchmarkError(Exception):
    """Base class for all benchmark harness errors."""


class InvalidSpec(BenchmarkError, ValueError):
    """A benchmark spec failed validation before any timing started."""


class ResourceExhausted(BenchmarkError):
    """The operation under test ran out of memory or another system resource.

    Attributes:
        name: Name of the benchmark that was running
        phase: "warmup" or "measure"
        iteration: 0-based index of the timed iteration that failed, which is
            also the number of timed iterations that completed
        requested: Number of timed iterations the spec asked for
    """

    def __init__(
        self,
        name: str,
        phase: str,
        iteration: int,
        requested: int,
        reason: Optional[str] = None,
    ):
        self.name = name
        self.phase = phase
        self.iteration = iteration
        self.requested = requested
        self.reason = reason

        if phase == "warmup":
            message = f"{name}: resource exhausted during warmup"
        else:
            message = (
                f"{name}: resource exhausted at iteration {iteration} "
                f"of {requested}"
            )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    @property
    def completed_iterations(self) -> int:
        """Number of timed iterations that finished before the failure."""
        return self.iteration if self.phase == "measure" else 0


def is_resource_exhaustion(exc: BaseException) -> bool:
    """Check whether an exception signals an unrecoverable resource shortage."""
    if isinstance(exc, MemoryError):
        return True
    if isinstance(exc, torch.cuda.OutOfMemoryError):
        return True
    if isinstance(exc, OSError) and exc.errno in _EXHAUSTION_ERRNOS:
        return True
    return False
