"""
Admin panel settings, read from ``settings.DUKAAN_ADMIN`` with fallbacks.
"""
from django.conf import settings

DEFAULTS = {
    'USERS_KEY': 'dukaan-users',
    'FEEDBACK_KEY': 'dukaan-feedback',
    'DEFAULT_PHONE': '+91 98765 43210',
    'ACTIVE_TODAY_RATIO': 0.65,
    'TOTAL_EXPENSE_ENTRIES': 342,
    'ERROR_RATE': 1.2,
    'PERSIST_MUTATIONS': False,
}


def panel_setting(name):
    """Return a DUKAAN_ADMIN setting, falling back to the built-in default"""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown admin panel setting: {name}")
    return getattr(settings, 'DUKAAN_ADMIN', {}).get(name, DEFAULTS[name])
