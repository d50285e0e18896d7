"""
Closed value sets used by the admin panel.
"""

ROLE_ADMIN = 'admin'

SHOP_ACTIVE = 'Active'
SHOP_SUSPENDED = 'Suspended'
SHOP_STATUS_CHOICES = [
    (SHOP_ACTIVE, 'Active'),
    (SHOP_SUSPENDED, 'Suspended'),
]

ISSUE_OPEN = 'Open'
ISSUE_IN_PROGRESS = 'In-Progress'
ISSUE_RESOLVED = 'Resolved'
ISSUE_REJECTED = 'Rejected'
ISSUE_STATUS_CHOICES = [
    (ISSUE_OPEN, 'Open'),
    (ISSUE_IN_PROGRESS, 'In Progress'),
    (ISSUE_RESOLVED, 'Resolved'),
    (ISSUE_REJECTED, 'Rejected'),
]

# Issue categories are open-ended; the filter chips are not.
CATEGORY_ALL = 'All'
CATEGORY_FILTER_CHOICES = [
    (CATEGORY_ALL, 'All'),
    ('Voice', 'Voice'),
    ('Stock', 'Stock'),
    ('Login', 'Login'),
    ('UI', 'UI'),
]

TAB_DASHBOARD = 'dashboard'
TAB_SHOPS = 'shops'
TAB_ISSUES = 'issues'
TAB_CHOICES = [
    (TAB_DASHBOARD, 'Overview'),
    (TAB_SHOPS, 'Shops'),
    (TAB_ISSUES, 'Feedback & Issues'),
]
