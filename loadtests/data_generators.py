"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request schemas and the
domain's validation rules.
"""

import random
import uuid

from faker import Faker

fake = Faker()


def valid_email() -> str:
    """Emails unique across a run: exactly one @ and a dotted domain."""
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:6]}@{domain}"


def registration_data() -> dict:
    return {
        "email": valid_email(),
        "password": fake.password(length=12),
        "name": fake.name(),
        "phone": fake.numerify("+1-###-###-####"),
        "address": fake.address().replace("\n", ", "),
    }


def category_name() -> str:
    return f"{fake.word().title()} {uuid.uuid4().hex[:4]}"


def product_data(category_id: str | None = None) -> dict:
    payload = {
        "name": f"{fake.color_name()} {fake.word().title()}",
        "price": round(random.uniform(2.0, 250.0), 2),
        "description": fake.sentence(nb_words=12),
        "stock": random.randint(0, 500),
        "imageUrl": fake.image_url(),
    }
    if category_id:
        payload["categoryId"] = category_id
    return payload


def search_term() -> str:
    return random.choice(["a", "e", "red", "blue", "cup", "shirt", "lamp"])
