import asyncio
import csv
import logging
import os
import sys
from typing import Optional

from dispatch.workflow import DeliverySimulation
from orders.batch import summarize_failures
from simulation.logging_config import setup_logging
from simulation.policy import SimulationPolicy
from simulation.settings import policy_from_env
from store import load_store, sample_store


def print_status(update):
    print(f"  Order {update.order_id}: {update.stage.value} at {update.timestamp.isoformat()}")


async def run_simulation(
    data_dir: Optional[str] = None,
    output_path: Optional[str] = None,
    policy: Optional[SimulationPolicy] = None,
):
    print("=== STARTING FOOD DELIVERY SIMULATION ===")

    # 1. Load Data
    store = load_store(data_dir) if data_dir else sample_store()
    stats = store.stats()
    print(f"Loaded {stats.order_count} Orders, {stats.restaurant_count} Restaurants and {stats.driver_count} Drivers.\n")

    # 2. Configure System
    policy = policy or policy_from_env()
    simulation = DeliverySimulation(store, policy=policy)
    order_ids = [order.id for order in store.orders()]

    # 3. Preparation-only batch (preview; nothing is assigned)
    print("Preparing orders in parallel...")
    batch = await simulation.process_multiple_orders(order_ids)
    print(f"Ready: {len(batch.successful)} / {len(order_ids)} in {batch.total_processing_time}s (simulated)")
    for line in summarize_failures(batch):
        print(f"  [FAILED] {line}")

    # 4. Track one order through every stage
    if order_ids:
        print("\nTracking first order...")
        await simulation.track_order_status(order_ids[0], print_status)

    # 5. Every order end to end: its own preparation, then assignment and delivery
    print("\nRunning orders end to end...")
    outcomes = await simulation.run_orders(order_ids)

    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = output_path or os.path.join(base_dir, "delivery_results.csv")

    with open(output_path, "w", newline='') as file:
        writer = csv.writer(file)
        writer.writerow(["order_id", "restaurant", "driver", "estimated_delivery_time", "delivered", "error"])
        for outcome in outcomes:
            writer.writerow([
                outcome.order_id,
                outcome.prepared.restaurant if outcome.prepared else store.restaurant_name_for_order(outcome.order_id),
                outcome.assignment.driver_name if outcome.assignment else "N/A",
                outcome.assignment.estimated_delivery_time if outcome.assignment else "N/A",
                outcome.delivered,
                outcome.error or "",
            ])
            if outcome.delivered:
                print(f"[SUCCESS] Order {outcome.order_id} -> delivered by {outcome.assignment.driver_name}")
            else:
                print(f"[FAILED] Order {outcome.order_id} -> {outcome.error}")

    delivered = sum(1 for outcome in outcomes if outcome.delivered)
    print("\n=== SIMULATION COMPLETE ===")
    print(f"Orders Delivered: {delivered} / {len(order_ids)}")
    print(f"Results written to '{output_path}'.")
    return outcomes


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging(logging.WARNING)
    data_dir = argv[0] if argv else None
    asyncio.run(run_simulation(data_dir))


if __name__ == "__main__":
    main()
