"""
Purpose: Core data model for the restaurants domain.
What it does:
Defines the immutable reference data for a restaurant: how long it takes to
prepare an order and how often preparation succeeds.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Restaurant:
    id: int
    name: str
    preparation_time_seconds: float
    success_rate: float  # probability in [0, 1] that preparation succeeds

    @classmethod
    def new(
        cls,
        restaurant_id: int,
        name: str,
        preparation_time_seconds: float,
        success_rate: float = 1.0,
    ) -> Restaurant:
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError(f"success_rate must be within [0, 1], got {success_rate}")

        if preparation_time_seconds < 0:
            raise ValueError("preparation_time_seconds must be >= 0")

        return cls(
            id=restaurant_id,
            name=name,
            preparation_time_seconds=preparation_time_seconds,
            success_rate=success_rate,
        )
