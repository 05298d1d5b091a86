import pytest

from dispatch.workflow import DeliverySimulation
from drivers.models import Driver
from orders.models import Order, OrderStage
from restaurants.models import Restaurant
from simulation.clock import VirtualClock
from simulation.policy import instant_policy
from store.memory import DeliveryStore


@pytest.fixture
def simulation(store, clock, fixed_random):
    # draw 0.5: every sample restaurant (>= 0.8) succeeds, no delivery fails
    return DeliverySimulation(store, policy=instant_policy(), clock=clock, rng=fixed_random(0.5))


@pytest.mark.asyncio
async def test_run_order_end_to_end(simulation, store, clock):
    stages = []

    outcome = await simulation.run_order(101, on_status=lambda update: stages.append(update.stage))

    assert outcome.error is None
    assert outcome.delivered
    assert outcome.prepared.restaurant == "Pizza Palace"
    assert outcome.assignment.driver_name == "Jordan"
    assert outcome.confirmation.driver_id == outcome.assignment.driver_id
    assert stages == [
        OrderStage.RECEIVED,
        OrderStage.PREPARING,
        OrderStage.READY,
        OrderStage.OUT_FOR_DELIVERY,
        OrderStage.DELIVERED,
    ]
    # 15s preparation + 10s drive
    assert clock.monotonic() == 25
    # driver back in the pool
    assert store.get_driver(3).is_available


@pytest.mark.asyncio
async def test_run_order_unknown_order(simulation):
    outcome = await simulation.run_order(999)

    assert outcome.error == "Order 999 not found"
    assert outcome.prepared is None
    assert not outcome.delivered


@pytest.mark.asyncio
async def test_run_order_stops_after_failed_preparation(store, clock, fixed_random):
    simulation = DeliverySimulation(store, policy=instant_policy(), clock=clock, rng=fixed_random(0.99))
    stages = []

    outcome = await simulation.run_order(101, on_status=lambda update: stages.append(update.stage))

    assert outcome.error == "Order 101 failed during preparation at Pizza Palace"
    assert outcome.assignment is None
    assert stages == [OrderStage.RECEIVED, OrderStage.PREPARING]
    # nobody was taken out of the pool
    assert store.stats().available_driver_count == 3


@pytest.mark.asyncio
async def test_run_orders_concurrently_with_one_driver(fixed_random):
    """
    Two orders ready at the same moment compete for a single driver:
    one is delivered, the other reports no drivers.
    """
    store = DeliveryStore.from_records(
        restaurants=[Restaurant.new(1, "Taco Town", preparation_time_seconds=8, success_rate=1.0)],
        drivers=[Driver.new(1, "Alex", 12)],
        orders=[Order.new(201, 1, ["Chicken Tacos"]), Order.new(202, 1, ["Burrito"])],
    )
    clock = VirtualClock()
    simulation = DeliverySimulation(store, policy=instant_policy(), clock=clock, rng=fixed_random(0.5))

    outcomes = await simulation.run_orders([201, 202])

    assert [o.order_id for o in outcomes] == [201, 202]
    assert outcomes[0].delivered
    assert outcomes[1].error == "No drivers available"
    assert outcomes[1].prepared is not None
    assert store.get_driver(1).is_available
    assert clock.monotonic() == 20


@pytest.mark.asyncio
async def test_simulation_batch_and_tracking_share_clock(simulation, clock):
    batch = await simulation.process_multiple_orders([101, 102, 103])
    assert len(batch.successful) == 3
    assert batch.total_processing_time == 20

    updates = await simulation.track_order_status(101, lambda update: None)
    assert len(updates) == 5
    assert clock.monotonic() == 28


def test_simulation_builds_clock_and_rng_from_policy(store):
    simulation = DeliverySimulation(store, policy=instant_policy(random_seed=3))

    assert isinstance(simulation.clock, VirtualClock)
    assert simulation.rng.random() == instant_policy(random_seed=3).make_random().random()
