"""
Demo Employees Data
Employees across departments; one on leave so the stats show every bucket
"""

from datetime import date

from app.models.employee import EmployeeStatus

DEMO_EMPLOYEES = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@company.com",
        "phone": "+1234567890",
        "department": "Engineering",
        "position": "Senior Software Engineer",
        "salary": 120000,
        "hire_date": date(2022, 1, 15),
        "status": EmployeeStatus.ACTIVE.value,
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane.smith@company.com",
        "phone": "+1234567891",
        "department": "Marketing",
        "position": "Marketing Manager",
        "salary": 95000,
        "hire_date": date(2021, 6, 20),
        "status": EmployeeStatus.ACTIVE.value,
    },
    {
        "first_name": "Michael",
        "last_name": "Johnson",
        "email": "michael.johnson@company.com",
        "phone": "+1234567892",
        "department": "Sales",
        "position": "Sales Representative",
        "salary": 75000,
        "hire_date": date(2023, 3, 10),
        "status": EmployeeStatus.ACTIVE.value,
    },
    {
        "first_name": "Emily",
        "last_name": "Williams",
        "email": "emily.williams@company.com",
        "phone": "+1234567893",
        "department": "HR",
        "position": "HR Manager",
        "salary": 85000,
        "hire_date": date(2020, 9, 5),
        "status": EmployeeStatus.ACTIVE.value,
    },
    {
        "first_name": "David",
        "last_name": "Brown",
        "email": "david.brown@company.com",
        "phone": "+1234567894",
        "department": "Engineering",
        "position": "Frontend Developer",
        "salary": 90000,
        "hire_date": date(2022, 11, 1),
        "status": EmployeeStatus.ACTIVE.value,
    },
    {
        "first_name": "Sarah",
        "last_name": "Davis",
        "email": "sarah.davis@company.com",
        "phone": "+1234567895",
        "department": "Finance",
        "position": "Financial Analyst",
        "salary": 80000,
        "hire_date": date(2021, 4, 15),
        "status": EmployeeStatus.ACTIVE.value,
    },
    {
        "first_name": "Robert",
        "last_name": "Wilson",
        "email": "robert.wilson@company.com",
        "phone": "+1234567896",
        "department": "Engineering",
        "position": "DevOps Engineer",
        "salary": 110000,
        "hire_date": date(2022, 7, 20),
        "status": EmployeeStatus.ON_LEAVE.value,
    },
    {
        "first_name": "Lisa",
        "last_name": "Anderson",
        "email": "lisa.anderson@company.com",
        "phone": "+1234567897",
        "department": "Design",
        "position": "UI/UX Designer",
        "salary": 85000,
        "hire_date": date(2023, 1, 10),
        "status": EmployeeStatus.ACTIVE.value,
    },
]
