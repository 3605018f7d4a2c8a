"""
Demo Tasks Data
Each task references an employee by their email in DEMO_EMPLOYEES
"""

from datetime import datetime, timedelta

from app.models.task import TaskStatus, TaskPriority

DEMO_TASKS = [
    {
        "title": "Implement user authentication",
        "description": "Add JWT-based authentication to the API",
        "status": TaskStatus.COMPLETED,
        "priority": TaskPriority.HIGH,
        "due_date": datetime.utcnow() - timedelta(days=30),
        "employee_email": "john.doe@company.com",
    },
    {
        "title": "Design new landing page",
        "description": "Create wireframes and mockups for the new landing page",
        "status": TaskStatus.IN_PROGRESS,
        "priority": TaskPriority.HIGH,
        "due_date": datetime.utcnow() + timedelta(days=14),
        "employee_email": "lisa.anderson@company.com",
    },
    {
        "title": "Update marketing campaign",
        "description": "Review and update Q1 marketing campaign materials",
        "status": TaskStatus.PENDING,
        "priority": TaskPriority.MEDIUM,
        "due_date": datetime.utcnow() + timedelta(days=21),
        "employee_email": "jane.smith@company.com",
    },
    {
        "title": "Prepare sales report",
        "description": "Compile monthly sales report for management",
        "status": TaskStatus.COMPLETED,
        "priority": TaskPriority.MEDIUM,
        "due_date": datetime.utcnow() - timedelta(days=3),
        "employee_email": "michael.johnson@company.com",
    },
    {
        "title": "Conduct employee training",
        "description": "Organize and conduct onboarding training for new hires",
        "status": TaskStatus.IN_PROGRESS,
        "priority": TaskPriority.HIGH,
        "due_date": datetime.utcnow() + timedelta(days=7),
        "employee_email": "emily.williams@company.com",
    },
    {
        "title": "Refactor frontend code",
        "description": "Improve code structure and performance",
        "status": TaskStatus.IN_PROGRESS,
        "priority": TaskPriority.MEDIUM,
        "due_date": datetime.utcnow() + timedelta(days=10),
        "employee_email": "david.brown@company.com",
    },
    {
        "title": "Financial audit preparation",
        "description": "Prepare documents for annual financial audit",
        "status": TaskStatus.PENDING,
        "priority": TaskPriority.URGENT,
        "due_date": datetime.utcnow() - timedelta(days=2),
        "employee_email": "sarah.davis@company.com",
    },
    {
        "title": "Setup CI/CD pipeline",
        "description": "Configure automated builds and deployments",
        "status": TaskStatus.PENDING,
        "priority": TaskPriority.LOW,
        "due_date": None,
        "employee_email": "robert.wilson@company.com",
    },
]
