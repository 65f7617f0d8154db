import logging
import os
from typing import Any, Iterable

from joblib import Parallel, delayed

_N_PARALLEL_JOBS: int | None = None


def set_n_parallel_jobs(n_jobs: int | None, print_message: bool = False):
    """
    Set the default number of jobs used by :func:`parallel`. ``None`` resets the
    default to the number of CPUs.
    """
    global _N_PARALLEL_JOBS
    if n_jobs is not None and n_jobs < 1:
        raise ValueError(f"n_jobs must be a positive integer or None, got {n_jobs}")
    _N_PARALLEL_JOBS = n_jobs
    if print_message:
        logging.warning(f"Using {get_n_parallel_jobs()} parallel jobs")


def get_n_parallel_jobs() -> int:
    if _N_PARALLEL_JOBS is None:
        return os.cpu_count() or 1
    return _N_PARALLEL_JOBS


def is_using_parallel_processing() -> bool:
    return get_n_parallel_jobs() > 1


def parallel(
    jobs: dict[Any, Any] | Iterable[Any],
    n_jobs: int | None = None,
) -> dict[Any, Any] | list[Any]:
    """
    Run joblib ``delayed`` jobs. If ``jobs`` is a dict, returns a dict with the same
    keys mapped to each job's result; otherwise returns the results in order.
    """
    if n_jobs is None:
        n_jobs = get_n_parallel_jobs()

    if isinstance(jobs, dict):
        keys = list(jobs.keys())
        results = parallel(list(jobs.values()), n_jobs=n_jobs)
        return dict(zip(keys, results))

    jobs = list(jobs)
    if not jobs:
        return []

    if n_jobs == 1 or len(jobs) == 1:
        return [func(*args, **kwargs) for func, args, kwargs in jobs]

    logging.info(f"Running {len(jobs)} jobs on {min(n_jobs, len(jobs))} workers")
    return Parallel(n_jobs=min(n_jobs, len(jobs)))(jobs)


__all__ = [
    "set_n_parallel_jobs",
    "get_n_parallel_jobs",
    "is_using_parallel_processing",
    "parallel",
    "delayed",
]
