"""
Static sample data.

SAMPLE_ISSUES stands in for the issue-reporting service. SAMPLE_SHOPS and
SAMPLE_FEEDBACK are only used by the seed_panel_data command to populate a
fresh storage; some shop records deliberately omit optional fields.
"""
import copy

SAMPLE_ISSUES = [
    {
        'id': 'ISS-101',
        'category': 'Voice',
        'description': "Rush Mode recorded 'paanch sau' as 5 kg instead of Rs 500",
        'submittedBy': 'Ramesh Kumar',
        'contact': 'ramesh.kirana@example.com',
        'timestamp': '2024-05-18T09:42:00+05:30',
        'hasScreenshot': True,
        'status': 'Open',
    },
    {
        'id': 'ISS-102',
        'category': 'Stock',
        'description': 'Stock count goes negative after deleting a sale entry',
        'submittedBy': 'Priya Nair',
        'contact': '+91 98450 11223',
        'timestamp': '2024-05-17T18:05:00+05:30',
        'hasScreenshot': False,
        'status': 'In-Progress',
        'adminNote': 'Reproduced on v1.4. Fix scheduled for next build.',
    },
    {
        'id': 'ISS-103',
        'category': 'Login',
        'description': 'OTP never arrives on Jio numbers',
        'submittedBy': 'Farhan Sheikh',
        'contact': 'farhan.sheikh@example.com',
        'timestamp': '2024-05-17T11:20:00+05:30',
        'hasScreenshot': False,
        'status': 'Open',
    },
    {
        'id': 'ISS-104',
        'category': 'UI',
        'description': 'Expense chart labels overlap on small screens',
        'submittedBy': 'Meena Joshi',
        'contact': 'meena.j@example.com',
        'timestamp': '2024-05-16T15:48:00+05:30',
        'hasScreenshot': True,
        'status': 'Resolved',
        'adminNote': 'Shortened labels in 1.4.2.',
    },
    {
        'id': 'ISS-105',
        'category': 'Voice',
        'description': 'Voice entry stops listening after 10 seconds in a noisy shop',
        'submittedBy': 'Ramesh Kumar',
        'contact': 'ramesh.kirana@example.com',
        'timestamp': '2024-05-15T19:30:00+05:30',
        'hasScreenshot': False,
        'status': 'Open',
    },
    {
        'id': 'ISS-106',
        'category': 'Stock',
        'description': 'Low stock alert shows for items already restocked',
        'submittedBy': 'Asha Verma',
        'contact': '+91 99001 22334',
        'timestamp': '2024-05-14T10:12:00+05:30',
        'hasScreenshot': True,
        'status': 'Rejected',
        'adminNote': 'Alert threshold was set to 500 by the user.',
    },
]

SAMPLE_SHOPS = [
    {
        'id': 'u-1001',
        'name': 'Asha Verma',
        'email': 'asha.verma@example.com',
        'role': 'shopkeeper',
        'registrationDate': '2024-03-02T10:15:00+05:30',
    },
    {
        'id': 'u-1002',
        'name': 'Ramesh Kumar',
        'email': 'ramesh.kirana@example.com',
        'shopName': 'Kumar Kirana Store',
        'phone': '+91 98111 45678',
        'role': 'shopkeeper',
        'status': 'Active',
        'registrationDate': '2024-02-11T08:00:00+05:30',
        'lastActive': '2024-05-18T21:04:00+05:30',
    },
    {
        'id': 'u-1003',
        'name': 'Priya Nair',
        'email': 'priya.nair@example.com',
        'shopName': 'Nair Textiles',
        'role': 'shopkeeper',
        'status': 'Suspended',
        'lastActive': '2024-04-29T13:30:00+05:30',
    },
    {
        'id': 'u-0001',
        'name': 'Dukaan Support',
        'email': 'support@example.com',
        'role': 'admin',
        'status': 'Active',
    },
]

SAMPLE_FEEDBACK = [
    {
        'id': 'fb-1',
        'userName': 'Asha Verma',
        'date': '2024-05-12',
        'rating': 5,
        'comment': 'Rush Mode saves me an hour every evening.',
    },
    {
        'id': 'fb-2',
        'userName': 'Ramesh Kumar',
        'date': '2024-05-15',
        'rating': 3,
        'comment': 'Voice entry struggles when the shop is crowded.',
    },
]


def sample_issues():
    """Return a fresh copy of the sample issues"""
    return copy.deepcopy(SAMPLE_ISSUES)
