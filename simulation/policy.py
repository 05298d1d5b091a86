"""
Purpose: Central configuration for the delivery simulation.
What it does:

Stores all tunable knobs for timing and randomness:

TIME_SCALE = 1.0               (real seconds per simulated second)
STATUS_INTERVAL_SECONDS = 2.0  (gap between tracker stages)
DELIVERY_FAILURE_RATE = 0.05   (chance a delivery fails on arrival)
RANDOM_SEED = None             (None means non-reproducible runs)

Rule: Parameters only, plus the factories that turn them into a clock and a
random source.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .clock import Clock, ScaledClock, VirtualClock


@dataclass(frozen=True)
class SimulationPolicy:
    """
    Central configuration for simulated latency and failure rates.
    """

    # --- Timing ---
    # Multiplier applied to every simulated delay when running on real time.
    # 1.0 replays preparation/delivery times literally, 0.0 skips the waits.
    time_scale: float = 1.0

    # Gap between two consecutive stages of the order status tracker.
    status_interval_seconds: float = 2.0

    # --- Failure injection ---
    # Probability that a driver arrives but the handover fails.
    delivery_failure_rate: float = 0.05

    # --- Reproducibility ---
    random_seed: Optional[int] = None

    # Run on a VirtualClock instead of real (scaled) time.
    virtual_time: bool = False

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.time_scale < 0:
            raise ValueError("time_scale must be >= 0")

        if self.status_interval_seconds < 0:
            raise ValueError("status_interval_seconds must be >= 0")

        if not 0.0 <= self.delivery_failure_rate <= 1.0:
            raise ValueError("delivery_failure_rate must be within [0, 1]")

    def make_clock(self) -> Clock:
        if self.virtual_time:
            return VirtualClock()
        return ScaledClock(self.time_scale)

    def make_random(self) -> random.Random:
        return random.Random(self.random_seed)


def default_policy() -> SimulationPolicy:
    """
    Convenience factory for the default policy (real time, 5% delivery failures).
    """
    p = SimulationPolicy()
    p.validate()
    return p


def instant_policy(random_seed: Optional[int] = 42) -> SimulationPolicy:
    """
    Virtual time and a fixed seed: full workflow runs finish immediately and
    reproduce exactly. Used by demos and tests.
    """
    p = SimulationPolicy(
        time_scale=0.0,
        random_seed=random_seed,
        virtual_time=True,
    )
    p.validate()
    return p
