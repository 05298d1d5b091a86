"""
Purpose: Load a DeliveryStore from CSV files.
What it does:
Reads the three sample tables produced by scripts/generate_mock_data.py:

restaurants.csv: restaurant_id, name, preparation_time_seconds, success_rate
drivers.csv:     driver_id, name, status, delivery_time_seconds
orders.csv:      order_id, restaurant_id, items, total_amount

`items` is a single "|"-separated column.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import pandas as pd

from drivers.models import Driver
from orders.models import Order
from restaurants.models import Restaurant

from .memory import DeliveryStore

logger = logging.getLogger(__name__)

ITEM_SEPARATOR = "|"

RESTAURANT_COLUMNS = ["restaurant_id", "name", "preparation_time_seconds", "success_rate"]
DRIVER_COLUMNS = ["driver_id", "name", "status", "delivery_time_seconds"]
ORDER_COLUMNS = ["order_id", "restaurant_id", "items", "total_amount"]


def _read_table(path: str, required_columns: List[str]) -> pd.DataFrame:
    df = pd.read_csv(path)
    missing = [column for column in required_columns if column not in df.columns]
    if missing:
        raise ValueError(f"{os.path.basename(path)} is missing columns: {', '.join(missing)}")
    return df


def _split_items(raw) -> List[str]:
    if pd.isna(raw) or raw == "":
        return []
    return [item.strip() for item in str(raw).split(ITEM_SEPARATOR) if item.strip()]


def load_restaurants(path: str) -> List[Restaurant]:
    df = _read_table(path, RESTAURANT_COLUMNS)
    return [
        Restaurant.new(
            int(row["restaurant_id"]),
            str(row["name"]),
            preparation_time_seconds=float(row["preparation_time_seconds"]),
            success_rate=float(row["success_rate"]),
        )
        for _, row in df.iterrows()
    ]


def load_drivers(path: str) -> List[Driver]:
    df = _read_table(path, DRIVER_COLUMNS)
    return [
        Driver.new(
            int(row["driver_id"]),
            str(row["name"]),
            delivery_time_seconds=float(row["delivery_time_seconds"]),
            status=str(row["status"]),
        )
        for _, row in df.iterrows()
    ]


def load_orders(path: str, limit: Optional[int] = None) -> List[Order]:
    df = _read_table(path, ORDER_COLUMNS)
    if limit is not None:
        df = df.head(limit)
    return [
        Order.new(
            int(row["order_id"]),
            int(row["restaurant_id"]),
            _split_items(row["items"]),
            float(row["total_amount"]),
        )
        for _, row in df.iterrows()
    ]


def load_store(data_dir: str, order_limit: Optional[int] = None) -> DeliveryStore:
    """
    Build a store from restaurants.csv, drivers.csv and orders.csv in `data_dir`.
    """
    store = DeliveryStore.from_records(
        restaurants=load_restaurants(os.path.join(data_dir, "restaurants.csv")),
        drivers=load_drivers(os.path.join(data_dir, "drivers.csv")),
        orders=load_orders(os.path.join(data_dir, "orders.csv"), limit=order_limit),
    )
    stats = store.stats()
    logger.info(
        "Loaded %d restaurants, %d drivers (%d available) and %d orders from %s",
        stats.restaurant_count, stats.driver_count, stats.available_driver_count, stats.order_count, data_dir,
    )
    return store
