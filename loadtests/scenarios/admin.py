"""Admin load test scenarios.

The admin logs in with ADMIN_EMAIL / ADMIN_PASSWORD (registering the account
on first use), stocks the catalog and works through placed orders.
"""

import os
import random

from locust import HttpUser, between, task

from loadtests.data_generators import category_name, product_data
from loadtests.helpers.state import AdminState

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin-password")

_NEXT_STATUS = {"started": "processing", "processing": "completed"}


class AdminUser(HttpUser):
    wait_time = between(2, 5)
    weight = 1

    def on_start(self):
        self.state = AdminState()
        credentials = {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}

        resp = self.client.post("/login", json=credentials, name="POST /login (admin)")
        if resp.status_code == 401:
            self.client.post("/register", json=credentials, name="POST /register (admin)")
            resp = self.client.post("/login", json=credentials, name="POST /login (admin)")

        if resp.status_code == 200:
            self.state.token = resp.json()["token"]

    @property
    def _headers(self):
        return {"Authorization": f"Bearer {self.state.token}"}

    @task(1)
    def create_category(self):
        with self.client.post(
            "/admin/category",
            json={"categoryName": category_name()},
            headers=self._headers,
            catch_response=True,
            name="POST /admin/category",
        ) as resp:
            if resp.status_code == 201:
                self.state.category_ids.append(resp.json()["id"])
            else:
                resp.failure(f"Create category failed: {resp.status_code}")

    @task(3)
    def create_product(self):
        category_id = random.choice(self.state.category_ids) if self.state.category_ids else None
        with self.client.post(
            "/products",
            json=product_data(category_id),
            headers=self._headers,
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Create product failed: {resp.status_code}")

    @task(3)
    def review_orders(self):
        status = random.choice(["started", "processing"])
        resp = self.client.get(
            "/admin/orders",
            params={"status": status},
            headers=self._headers,
            name="GET /admin/orders?status",
        )
        if resp.status_code == 200:
            self.state.open_order_ids = [(order["id"], order["status"]) for order in resp.json()[:10]]

    @task(2)
    def advance_order(self):
        if not self.state.open_order_ids:
            return
        order_id, status = self.state.open_order_ids.pop()
        with self.client.post(
            f"/admin/orders/{order_id}/status",
            json={"orderStatus": _NEXT_STATUS[status]},
            headers=self._headers,
            catch_response=True,
            name="POST /admin/orders/{id}/status",
        ) as resp:
            if resp.status_code == 400:
                # Another admin moved it first
                resp.success()
            elif resp.status_code != 200:
                resp.failure(f"Status update failed: {resp.status_code}")

    @task(1)
    def list_users(self):
        self.client.get("/admin/users", headers=self._headers, name="GET /admin/users")
