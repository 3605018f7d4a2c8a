"""
Demo login accounts for the Employee Management API
One admin account and one read-only user account
"""

from app.models.user import UserRole

DEMO_USERS = [
    {
        "name": "Admin User",
        "email": "admin@example.com",
        "password": "admin123",
        "role": UserRole.ADMIN,
    },
    {
        "name": "Regular User",
        "email": "user@example.com",
        "password": "user123",
        "role": UserRole.USER,
    },
]
