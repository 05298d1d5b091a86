import random

import pytest

from orders.batch import process_multiple_orders, summarize_failures
from orders.models import BatchResult, Order
from restaurants.models import Restaurant
from store.memory import DeliveryStore


@pytest.fixture
def mixed_store():
    """
    One restaurant that always succeeds, one that always fails
    (with a fixed draw of 0.5).
    """
    return DeliveryStore.from_records(
        restaurants=[
            Restaurant.new(1, "Pizza Palace", preparation_time_seconds=15, success_rate=1.0),
            Restaurant.new(2, "Burger Barn", preparation_time_seconds=10, success_rate=0.0),
            Restaurant.new(3, "Sushi Spot", preparation_time_seconds=20, success_rate=1.0),
        ],
        orders=[
            Order.new(101, 1, ["Pizza Margherita", "Coke"], 15.99),
            Order.new(102, 2, ["Cheeseburger", "Fries"], 12.5),
            Order.new(103, 3, ["Salmon Roll", "Miso Soup"], 18.75),
            Order.new(104, 9, ["Mystery Meal"], 9.99),
        ],
    )


@pytest.mark.asyncio
async def test_empty_batch(store, clock):
    result = await process_multiple_orders(store, [], clock=clock, rng=random.Random(0))

    assert result == BatchResult(successful=[], failed=[], total_processing_time=0)


@pytest.mark.asyncio
async def test_orders_run_concurrently(mixed_store, clock, fixed_random):
    """
    Elapsed time is the slowest preparation (20s), not the sum (35s).
    """
    result = await process_multiple_orders(mixed_store, [101, 103], clock=clock, rng=fixed_random(0.5))

    assert [r.order_id for r in result.successful] == [101, 103]
    assert result.failed == []
    assert result.total_processing_time == 20


@pytest.mark.asyncio
async def test_one_failure_does_not_cancel_siblings(mixed_store, clock, fixed_random):
    result = await process_multiple_orders(mixed_store, [101, 102, 103], clock=clock, rng=fixed_random(0.5))

    # 1. Successes keep input order
    assert [r.order_id for r in result.successful] == [101, 103]
    assert all(r.status == "ready" for r in result.successful)

    # 2. Failure carries id, message and restaurant name
    assert len(result.failed) == 1
    failure = result.failed[0]
    assert failure.order_id == 102
    assert failure.error == "Order 102 failed during preparation at Burger Barn"
    assert failure.restaurant == "Burger Barn"

    assert result.total_processing_time == 20


@pytest.mark.asyncio
async def test_unknown_order_and_restaurant_become_failures(mixed_store, clock, fixed_random):
    result = await process_multiple_orders(mixed_store, [999, 104, 101], clock=clock, rng=fixed_random(0.5))

    assert [r.order_id for r in result.successful] == [101]
    assert [(f.order_id, f.error, f.restaurant) for f in result.failed] == [
        (999, "Order 999 not found", "Unknown"),
        (104, "Restaurant 9 not found", "Unknown"),
    ]


@pytest.mark.asyncio
async def test_every_order_settles_exactly_once(store, clock):
    order_ids = [101, 102, 103]

    result = await process_multiple_orders(store, order_ids, clock=clock, rng=random.Random(3))

    settled = [r.order_id for r in result.successful] + [f.order_id for f in result.failed]
    assert sorted(settled) == order_ids
    assert result.total_processing_time == 20


@pytest.mark.asyncio
async def test_summarize_failures(mixed_store, clock, fixed_random):
    result = await process_multiple_orders(mixed_store, [102], clock=clock, rng=fixed_random(0.5))

    assert summarize_failures(result) == [
        "102 (Burger Barn): Order 102 failed during preparation at Burger Barn"
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("preparation_time, expected", [(0.5, 1), (2.5, 3), (4.5, 5), (2.4, 2)])
async def test_processing_time_rounds_halves_up(clock, fixed_random, preparation_time, expected):
    store = DeliveryStore.from_records(
        restaurants=[Restaurant.new(1, "Taco Town", preparation_time_seconds=preparation_time, success_rate=1.0)],
        orders=[Order.new(201, 1, ["Burrito"])],
    )

    result = await process_multiple_orders(store, [201], clock=clock, rng=fixed_random(0.5))

    assert result.total_processing_time == expected
