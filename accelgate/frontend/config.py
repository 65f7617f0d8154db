import logging
import os
import sys
from typing import Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, field_validator

from accelgate.util import set_n_parallel_jobs


def get_config_path() -> str:
    if hasattr(sys, "real_prefix") or (
        hasattr(sys, "base_prefix") and sys.base_prefix != sys.prefix
    ):
        return os.path.join(sys.prefix, "accelgate", "config.yaml")
    return os.path.join(user_config_dir("accelgate"), "config.yaml")


def get_config() -> "Config":
    f = get_config_path()

    if not os.path.exists(f):
        logging.warning(f"No configuration file found. Creating config file at {f}.")
        os.makedirs(os.path.dirname(f), exist_ok=True)
        Config().to_yaml(f)

    logging.warning(f"Loading configuration file from {f}")
    return Config.from_yaml(f)


class Config(BaseModel):
    n_parallel_jobs: Optional[int] = None
    """
    Number of evaluations to run concurrently in
    :func:`~accelgate.model.main.evaluate_many`. None uses one job per CPU.
    """
    log_level: str = "WARNING"
    """
    Level for the root logger, as a name from the `logging` module (e.g. "INFO").
    """

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, level: str) -> str:
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {level!r}")
        return level

    @field_validator("n_parallel_jobs")
    @classmethod
    def _check_n_parallel_jobs(cls, n: Optional[int]) -> Optional[int]:
        if n is not None and n < 1:
            raise ValueError(f"n_parallel_jobs must be positive, got {n}")
        return n

    def apply(self) -> "Config":
        """Apply this configuration to the running process."""
        logging.getLogger().setLevel(self.log_level)
        set_n_parallel_jobs(self.n_parallel_jobs)
        return self

    @classmethod
    def from_yaml(cls, f: str) -> "Config":
        from accelgate.util import _yaml

        data = _yaml.load_yaml(f)
        return cls(**data)

    def to_yaml(self, f: str) -> None:
        from accelgate.util import _yaml

        _yaml.write_yaml(self.model_dump(), f)
