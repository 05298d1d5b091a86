import csv

import pytest

from scripts.run_delivery_simulation import run_simulation
from simulation.policy import instant_policy


@pytest.mark.asyncio
async def test_every_order_runs_end_to_end(tmp_path, capsys):
    """
    The end-to-end pass covers every order in the store, including ones the
    preparation preview may have failed, and the summary counts against all
    of them.
    """
    output_path = tmp_path / "results.csv"

    outcomes = await run_simulation(output_path=str(output_path), policy=instant_policy(random_seed=7))

    assert [outcome.order_id for outcome in outcomes] == [101, 102, 103]

    with open(output_path, newline="") as file:
        rows = list(csv.DictReader(file))
    assert [row["order_id"] for row in rows] == ["101", "102", "103"]

    delivered = sum(1 for outcome in outcomes if outcome.delivered)
    assert f"Orders Delivered: {delivered} / 3" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_failed_orders_are_reported_not_dropped(tmp_path):
    output_path = tmp_path / "results.csv"

    outcomes = await run_simulation(output_path=str(output_path), policy=instant_policy(random_seed=7))

    with open(output_path, newline="") as file:
        rows = {row["order_id"]: row for row in csv.DictReader(file)}
    for outcome in outcomes:
        row = rows[str(outcome.order_id)]
        assert row["delivered"] == str(outcome.delivered)
        assert row["error"] == (outcome.error or "")
