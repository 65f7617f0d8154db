from .parallel import *
from .exceptions import EvaluationError, UnknownComponentTypeError, UnknownDataSpaceError
from .parallel import (
    set_n_parallel_jobs,
    get_n_parallel_jobs,
    is_using_parallel_processing,
    parallel,
    delayed,
)

__all__ = [
    # From parallel
    "set_n_parallel_jobs",
    "get_n_parallel_jobs",
    "is_using_parallel_processing",
    "parallel",
    "delayed",
    # Exceptions
    "EvaluationError",
    "UnknownComponentTypeError",
    "UnknownDataSpaceError",
]
