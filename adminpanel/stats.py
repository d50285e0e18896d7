"""
Dashboard statistics.

Only the shop counts are computed. Expense entries, error rate and the two
chart series are placeholders until a metrics source is wired in.
"""
import math

from .conf import panel_setting

ENTRY_TYPE_SPLIT = [
    {'name': 'Manual Entry', 'value': 65},
    {'name': 'Voice (Rush Mode)', 'value': 35},
]

HOURLY_ACTIVITY = [
    {'name': '09:00', 'sales': 40, 'voice': 10},
    {'name': '11:00', 'sales': 120, 'voice': 45},
    {'name': '13:00', 'sales': 90, 'voice': 30},
    {'name': '15:00', 'sales': 85, 'voice': 25},
    {'name': '17:00', 'sales': 150, 'voice': 80},
    {'name': '19:00', 'sales': 180, 'voice': 100},
    {'name': '21:00', 'sales': 60, 'voice': 20},
]


def total_shops(users):
    return len(users)


def active_today_estimate(total, ratio=None):
    """Heuristic shops-active-today figure, never below 1"""
    if ratio is None:
        ratio = panel_setting('ACTIVE_TODAY_RATIO')
    return max(1, math.floor(total * ratio))


def voice_usage_percent(split=None):
    """Share of voice entries in the entry-type split, rounded to an int"""
    split = ENTRY_TYPE_SPLIT if split is None else split
    total = sum(entry['value'] for entry in split)
    if not total:
        return 0
    voice = sum(entry['value'] for entry in split if entry['name'].startswith('Voice'))
    return round(voice * 100 / total)


def dashboard_stats(users):
    """Everything the Overview tab shows, as plain data"""
    shops = total_shops(users)
    active_today = active_today_estimate(shops)
    expense_entries = panel_setting('TOTAL_EXPENSE_ENTRIES')
    error_rate = panel_setting('ERROR_RATE')

    return {
        'total_shops': shops,
        'active_today': active_today,
        'total_expense_entries': expense_entries,
        'error_rate': error_rate,
        'cards': [
            {'title': 'Total Shops', 'value': shops, 'trend': '12%', 'trend_up': True},
            {'title': 'Active Today', 'value': active_today, 'trend': '5%', 'trend_up': True},
            {'title': 'Total Expenses', 'value': expense_entries, 'trend': 'Normal', 'trend_up': True},
            {'title': 'Error Rate', 'value': f'{error_rate}%', 'trend': 'Stable', 'trend_up': True},
        ],
        'entry_type_split': [dict(entry) for entry in ENTRY_TYPE_SPLIT],
        'voice_usage_percent': voice_usage_percent(),
        'hourly_activity': [dict(point) for point in HOURLY_ACTIVITY],
    }
