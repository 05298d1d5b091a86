"""
Reads simulation settings from the environment.

Example .env:
FOODSIM_TIME_SCALE=0.1
FOODSIM_STATUS_INTERVAL_SECONDS=2
FOODSIM_DELIVERY_FAILURE_RATE=0.05
FOODSIM_RANDOM_SEED=42
FOODSIM_VIRTUAL_TIME=false
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

from .policy import SimulationPolicy

ENV_PREFIX = "FOODSIM_"

_TRUTHY = {"1", "true", "yes", "on"}


def _env(name: str) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def policy_from_env(load_env_file: bool = True) -> SimulationPolicy:
    """
    Build a SimulationPolicy from FOODSIM_* variables, falling back to the
    dataclass defaults for anything unset. Raises ValueError on bad values.
    """
    if load_env_file:
        load_dotenv()

    defaults = SimulationPolicy()

    time_scale = _env("TIME_SCALE")
    interval = _env("STATUS_INTERVAL_SECONDS")
    failure_rate = _env("DELIVERY_FAILURE_RATE")
    seed = _env("RANDOM_SEED")
    virtual_time = _env("VIRTUAL_TIME")

    policy = SimulationPolicy(
        time_scale=float(time_scale) if time_scale is not None else defaults.time_scale,
        status_interval_seconds=float(interval) if interval is not None else defaults.status_interval_seconds,
        delivery_failure_rate=float(failure_rate) if failure_rate is not None else defaults.delivery_failure_rate,
        random_seed=int(seed) if seed is not None else defaults.random_seed,
        virtual_time=virtual_time.lower() in _TRUTHY if virtual_time is not None else defaults.virtual_time,
    )
    policy.validate()
    return policy
