import os

import numpy as np
import pandas as pd

MENU_ITEMS = [
    "Pizza Margherita", "Pepperoni Pizza", "Cheeseburger", "Veggie Burger", "Fries",
    "Salmon Roll", "Miso Soup", "Chicken Tacos", "Burrito", "Coke", "Lemonade", "Brownie",
]

CUISINES = ["Pizza", "Burger", "Sushi", "Taco", "Curry", "Noodle", "Salad", "Grill"]


def generate_mock_data(
    num_restaurants=10,
    num_drivers=8,
    num_orders=40,
    output_dir="sampledata",
    seed=None,
):
    """
    Generates restaurants.csv, drivers.csv and orders.csv in the layout that
    store.loaders.load_store() reads. Orders reference existing restaurants
    and carry 1-4 menu items joined with "|".
    """
    rng = np.random.default_rng(seed)
    os.makedirs(output_dir, exist_ok=True)

    # 1. Restaurants: prep time 5-25s, success rate 0.75-0.99
    restaurants = pd.DataFrame({
        "restaurant_id": np.arange(1, num_restaurants + 1),
        "name": [f"{rng.choice(CUISINES)} Place {i + 1}" for i in range(num_restaurants)],
        "preparation_time_seconds": rng.integers(5, 26, size=num_restaurants),
        "success_rate": np.round(rng.uniform(0.75, 0.99, size=num_restaurants), 2),
    })

    # 2. Drivers: 80% available, the rest already busy or offline
    drivers = pd.DataFrame({
        "driver_id": np.arange(1, num_drivers + 1),
        "name": [f"Driver {str(i + 1).zfill(3)}" for i in range(num_drivers)],
        "status": rng.choice(["available", "on_delivery", "offline"], size=num_drivers, p=[0.8, 0.1, 0.1]),
        "delivery_time_seconds": rng.integers(8, 31, size=num_drivers),
    })

    # 3. Orders
    order_rows = []
    for order_index in range(num_orders):
        item_count = int(rng.integers(1, 5))
        items = rng.choice(MENU_ITEMS, size=item_count, replace=False)
        order_rows.append({
            "order_id": 101 + order_index,
            "restaurant_id": int(rng.integers(1, num_restaurants + 1)),
            "items": "|".join(items),
            "total_amount": float(np.round(rng.uniform(5.0, 60.0), 2)),
        })
    orders = pd.DataFrame(order_rows)

    restaurants.to_csv(os.path.join(output_dir, "restaurants.csv"), index=False)
    drivers.to_csv(os.path.join(output_dir, "drivers.csv"), index=False)
    orders.to_csv(os.path.join(output_dir, "orders.csv"), index=False)

    print(f"Generated {num_restaurants} restaurants, {num_drivers} drivers and {num_orders} orders into '{output_dir}'")

    print("\nBusiest restaurants:")
    counts = orders["restaurant_id"].value_counts().head(5)
    names = restaurants.set_index("restaurant_id")["name"]
    for restaurant_id, count in counts.items():
        print(f"  {names[restaurant_id]}: {count} orders")

    return restaurants, drivers, orders


if __name__ == "__main__":
    generate_mock_data()
