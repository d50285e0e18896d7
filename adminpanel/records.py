"""
Loading panel collections from the key/value storage.
"""
import logging

from django.utils import timezone

from api.storage import read_json_array, write_json_array
from .choices import SHOP_ACTIVE, SHOP_STATUS_CHOICES
from .conf import panel_setting
from .sample_data import sample_issues
from .state import AdminPanelState

logger = logging.getLogger(__name__)

SHOP_STATUSES = {value for value, _ in SHOP_STATUS_CHOICES}


def default_shop_name(name):
    """'Asha Verma' -> "Asha's Store" """
    first_name = (name or '').split(' ')[0]
    return f"{first_name}'s Store"


def with_shop_defaults(record, now=None):
    """
    Return a copy of a stored user record with display defaults filled in.
    Empty values count as missing.
    """
    shop = dict(record)
    shop['shopName'] = shop.get('shopName') or default_shop_name(shop.get('name'))
    shop['phone'] = shop.get('phone') or panel_setting('DEFAULT_PHONE')

    status = shop.get('status') or SHOP_ACTIVE
    if status not in SHOP_STATUSES:
        logger.warning(f"Shop {shop.get('id')} has unknown status '{status}', treating as {SHOP_ACTIVE}")
        status = SHOP_ACTIVE
    shop['status'] = status

    if not shop.get('lastActive'):
        shop['lastActive'] = (now or timezone.now()).isoformat()
    shop.setdefault('registrationDate', None)
    return shop


def unique_records(items, label):
    """Keep JSON objects with an id, first occurrence of each id wins"""
    records = []
    seen = set()
    for item in items:
        if not isinstance(item, dict):
            logger.warning(f"Dropping {label} entry that is not an object: {item!r}")
            continue
        record_id = item.get('id')
        if record_id is None:
            logger.warning(f"Dropping {label} entry without an id")
            continue
        if str(record_id) in seen:
            logger.warning(f"Dropping duplicate {label} id {record_id}")
            continue
        seen.add(str(record_id))
        records.append(item)
    return records


def load_shops():
    now = timezone.now()
    stored = read_json_array(panel_setting('USERS_KEY'))
    return [with_shop_defaults(record, now) for record in unique_records(stored, 'user')]


def load_feedback():
    return unique_records(read_json_array(panel_setting('FEEDBACK_KEY')), 'feedback')


def load_issues():
    return unique_records(sample_issues(), 'issue')


def mount_panel_state():
    """Build a fresh panel state from storage and the sample issue source"""
    state = AdminPanelState.mount(
        users=load_shops(),
        feedback=load_feedback(),
        issues=load_issues(),
    )
    logger.info(
        f"Admin panel mounted: {len(state.users)} users, "
        f"{len(state.feedback)} feedback, {len(state.issues)} issues"
    )
    return state


def save_shops(users):
    """Write the user collection back to storage"""
    key = panel_setting('USERS_KEY')
    write_json_array(key, users)
    logger.info(f"Persisted {len(users)} users to '{key}'")
