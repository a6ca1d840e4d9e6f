"""Shopper load test scenarios.

A SequentialTaskSet journey through registration, browsing, the cart and
checkout. Steps execute in order and each depends on the previous one.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import registration_data, search_term
from loadtests.helpers.state import ShopperState


class ShopperJourney(SequentialTaskSet):
    """Register -> Login -> Browse -> Add to cart x2 -> Remove one -> Checkout -> Change address."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        payload = registration_data()
        with self.client.post("/register", json=payload, catch_response=True, name="POST /register") as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["id"]
                self.state.email = payload["email"]
                self.state.password = payload["password"]
                self.state.address = payload["address"]
            else:
                resp.failure(f"Register failed: {resp.status_code}")
                self.interrupt()

    @task
    def login(self):
        with self.client.post(
            "/login",
            json={"email": self.state.email, "password": self.state.password},
            catch_response=True,
            name="POST /login",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Login failed: {resp.status_code}")

    @task
    def browse(self):
        with self.client.get(
            "/products",
            params={"search": search_term()},
            catch_response=True,
            name="GET /products?search",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code}")
                return

        resp = self.client.get("/products", name="GET /products")
        if resp.status_code == 200:
            products = resp.json()
            self.state.product_ids = [p["id"] for p in random.sample(products, min(3, len(products)))]

        if not self.state.product_ids:
            # Nothing to buy until an admin has stocked the catalog
            self.interrupt()

    @task
    def add_to_cart(self):
        for product_id in self.state.product_ids:
            quantity = random.randint(1, 3)
            with self.client.post(
                "/cart/add",
                json={"userId": self.state.user_id, "productId": product_id, "quantity": quantity},
                catch_response=True,
                name="POST /cart/add",
            ) as resp:
                if resp.status_code == 200:
                    self.state.cart_items[product_id] = self.state.cart_items.get(product_id, 0) + quantity
                elif resp.status_code == 404:
                    # Product deleted by a concurrent admin
                    resp.success()
                else:
                    resp.failure(f"Add to cart failed: {resp.status_code}")

    @task
    def remove_from_cart(self):
        if len(self.state.cart_items) < 2:
            return
        product_id = next(iter(self.state.cart_items))
        with self.client.post(
            "/cart/remove",
            json={"userId": self.state.user_id, "productId": product_id},
            catch_response=True,
            name="POST /cart/remove",
        ) as resp:
            if resp.status_code == 200:
                self.state.cart_items.pop(product_id)
            else:
                resp.failure(f"Remove from cart failed: {resp.status_code}")

    @task
    def checkout(self):
        if not self.state.cart_items:
            self.interrupt()
        payload = {
            "user": {"id": self.state.user_id, "address": self.state.address},
            "items": [{"id": pid, "quantity": qty} for pid, qty in self.state.cart_items.items()],
            "total": round(random.uniform(10.0, 500.0), 2),
        }
        with self.client.post("/orders", json=payload, catch_response=True, name="POST /orders") as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["id"])
            elif resp.status_code == 404:
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code}")

    @task
    def change_address(self):
        if not self.state.order_ids:
            return
        with self.client.put(
            "/orders",
            json={"id": self.state.order_ids[-1], "address": "42 Elsewhere Rd"},
            catch_response=True,
            name="PUT /orders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Address change failed: {resp.status_code}")

    @task
    def view_profile(self):
        self.client.get(f"/profile/{self.state.user_id}", name="GET /profile/{id}")
        self.interrupt()


class ShopperUser(HttpUser):
    """Simulated shopper running the full purchase journey."""

    tasks = [ShopperJourney]
    wait_time = between(1, 3)
