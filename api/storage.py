"""
Key/value persistence boundary.

Values are stored as raw strings, the way the client keeps them in local
storage. Readers that expect a JSON array get ``[]`` whenever the key is
missing or its value cannot be used.
"""
import json
import logging

from .models import StoredValue

logger = logging.getLogger(__name__)


def get_value(key):
    """Return the raw string stored under ``key`` or None."""
    return StoredValue.objects.filter(key=key).values_list('value', flat=True).first()


def set_value(key, value):
    """Create or replace the raw string stored under ``key``."""
    stored, _ = StoredValue.objects.update_or_create(key=key, defaults={'value': value})
    return stored


def read_json_array(key):
    """
    Decode the JSON array stored under ``key``.
    Missing keys, malformed JSON and non-array JSON all read as an empty list.
    """
    raw = get_value(key)
    if not raw:
        return []

    try:
        data = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Ignoring malformed JSON under '{key}': {e}")
        return []

    if not isinstance(data, list):
        logger.warning(f"Ignoring non-array value under '{key}' ({type(data).__name__})")
        return []

    return data


def write_json_array(key, items):
    """Serialize ``items`` as a JSON array and store it under ``key``."""
    return set_value(key, json.dumps(list(items)))
