"""
Pure operations over the shop and issue collections.

Every function returns a new list and leaves its input untouched. Records
that are not targeted are passed through as the same objects. Ids are
compared as strings because URL lookups arrive as strings while stored ids
may be numbers.
"""
from .choices import CATEGORY_ALL, ROLE_ADMIN, SHOP_ACTIVE, SHOP_SUSPENDED


def same_id(record, record_id):
    return str(record.get('id')) == str(record_id)


def find_by_id(records, record_id):
    """Return the first record with a matching id, or None"""
    for record in records:
        if same_id(record, record_id):
            return record
    return None


def flipped_status(status):
    return SHOP_SUSPENDED if status == SHOP_ACTIVE else SHOP_ACTIVE


def toggle_shop_status(users, user_id):
    """Flip Active/Suspended on the matching shop"""
    return [
        {**user, 'status': flipped_status(user.get('status'))} if same_id(user, user_id) else user
        for user in users
    ]


def update_issue_status(issues, issue_id, status):
    """
    Assign ``status`` to the matching issue.
    No transition rules: any status may follow any other.
    """
    return [
        {**issue, 'status': status} if same_id(issue, issue_id) else issue
        for issue in issues
    ]


def attach_admin_note(issues, issue_id, note):
    """Set the admin note on the matching issue"""
    return [
        {**issue, 'adminNote': note} if same_id(issue, issue_id) else issue
        for issue in issues
    ]


def filter_by_category(issues, category):
    """Stable category filter; 'All' returns every issue in order"""
    if category == CATEGORY_ALL:
        return list(issues)
    return [issue for issue in issues if issue.get('category') == category]


def registry_shops(users):
    """Shops shown in the registry table (admin accounts excluded)"""
    return [user for user in users if user.get('role') != ROLE_ADMIN]
