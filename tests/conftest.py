"""Shared fixtures: staff API client and pre-filled panel storage."""

from __future__ import annotations

import json

import pytest
from rest_framework.test import APIClient

from api.models import StoredValue


RAW_SHOPS = [
    {
        "id": "u1",
        "name": "Asha Verma",
        "email": "asha@example.com",
        "role": "shopkeeper",
    },
    {
        "id": "u2",
        "name": "Ravi Shah",
        "email": "ravi@example.com",
        "shopName": "Shah General",
        "phone": "+91 90000 00000",
        "role": "shopkeeper",
        "status": "Suspended",
        "registrationDate": "2024-01-05T10:00:00+00:00",
        "lastActive": "2024-05-01T10:00:00+00:00",
    },
    {
        "id": "u3",
        "name": "Kiran Rao",
        "email": "kiran@example.com",
        "role": "shopkeeper",
        "status": "Active",
    },
    {
        "id": "admin1",
        "name": "Ops Admin",
        "email": "ops@example.com",
        "role": "admin",
    },
]

RAW_FEEDBACK = [
    {"id": "fb1", "userName": "Asha Verma", "date": "2024-05-12", "rating": 5, "comment": "Great"},
    {"id": "fb2", "userName": "Ravi Shah", "date": "2024-05-13", "rating": 2, "comment": "Voice is slow"},
]


@pytest.fixture
def raw_shops() -> list[dict]:
    return json.loads(json.dumps(RAW_SHOPS))


@pytest.fixture
def raw_feedback() -> list[dict]:
    return json.loads(json.dumps(RAW_FEEDBACK))


@pytest.fixture
def store_value(db):
    """Write a raw string under a storage key."""

    def _store(key: str, value: str) -> None:
        StoredValue.objects.update_or_create(key=key, defaults={"value": value})

    return _store


@pytest.fixture
def seeded_storage(store_value, raw_shops, raw_feedback) -> None:
    store_value("dukaan-users", json.dumps(raw_shops))
    store_value("dukaan-feedback", json.dumps(raw_feedback))


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="ops", password="ops-pass-123", is_staff=True
    )


@pytest.fixture
def api_client(staff_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def persist_mutations(settings):
    settings.DUKAAN_ADMIN = {**settings.DUKAAN_ADMIN, "PERSIST_MUTATIONS": True}
