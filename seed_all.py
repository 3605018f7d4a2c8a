"""
Master Database Seeding Script
Creates database tables and populates them with demo accounts, employees and tasks
"""

import sys
from datetime import datetime

from app.database import SessionLocal
from app.models.employee import Employee
from app.models.task import Task
from app.models.user import User
from app.utils.security import hash_password
from create_tables import create_tables

# Import demo data
from demo_users import DEMO_USERS
from demo_employees import DEMO_EMPLOYEES
from demo_tasks import DEMO_TASKS


def seed_demo_users():
    """Create the demo login accounts"""
    print(f"\n{'='*60}")
    print("🚀 Creating Demo Users")
    print(f"{'='*60}")

    session = SessionLocal()
    try:
        created = 0
        for user_data in DEMO_USERS:
            if session.query(User.id).filter(User.email == user_data["email"]).first():
                print(f"[SKIP] User {user_data['email']} already exists, skipping...")
                continue

            session.add(User(
                name=user_data["name"],
                email=user_data["email"],
                hashed_password=hash_password(user_data["password"]),
                role=user_data["role"],
            ))
            created += 1
            print(f"[SUCCESS] Created user: {user_data['email']} ({user_data['role']})")

        session.commit()
        print(f"\n[SUCCESS] Successfully created {created} demo users!")
        return True

    except Exception as e:
        print(f"[ERROR] Error creating demo users: {e}")
        session.rollback()
        return False
    finally:
        session.close()


def seed_demo_employees():
    """Create demo employees, skipping emails that already exist"""
    print(f"\n{'='*60}")
    print("🚀 Creating Demo Employees")
    print(f"{'='*60}")

    session = SessionLocal()
    try:
        created = 0
        for employee_data in DEMO_EMPLOYEES:
            if session.query(Employee.id).filter(Employee.email == employee_data["email"]).first():
                print(f"[SKIP] Employee {employee_data['email']} already exists, skipping...")
                continue

            session.add(Employee(**employee_data))
            created += 1
            print(f"[SUCCESS] Created employee: {employee_data['first_name']} {employee_data['last_name']}")

        session.commit()
        print(f"\n[SUCCESS] Successfully created {created} demo employees!")
        return True

    except Exception as e:
        print(f"[ERROR] Error creating demo employees: {e}")
        session.rollback()
        return False
    finally:
        session.close()


def seed_demo_tasks():
    """Create demo tasks for the seeded employees"""
    print(f"\n{'='*60}")
    print("🚀 Creating Demo Tasks")
    print(f"{'='*60}")

    session = SessionLocal()
    try:
        created = 0
        for task_data in DEMO_TASKS:
            employee = session.query(Employee).filter(Employee.email == task_data["employee_email"]).first()
            if not employee:
                print(f"[SKIP] Employee {task_data['employee_email']} not found for task '{task_data['title']}'")
                continue

            exists = session.query(Task.id).filter(
                Task.title == task_data["title"],
                Task.employee_id == employee.id,
            ).first()
            if exists:
                print(f"[SKIP] Task '{task_data['title']}' already exists, skipping...")
                continue

            session.add(Task(
                title=task_data["title"],
                description=task_data["description"],
                status=task_data["status"].value,
                priority=task_data["priority"].value,
                due_date=task_data["due_date"],
                employee_id=employee.id,
            ))
            created += 1
            print(f"[SUCCESS] Created task: {task_data['title']} -> {employee.full_name}")

        session.commit()
        print(f"\n[SUCCESS] Successfully created {created} demo tasks!")
        return True

    except Exception as e:
        print(f"[ERROR] Error creating demo tasks: {e}")
        session.rollback()
        return False
    finally:
        session.close()


def main():
    """Main function to run all seeding operations"""
    print("🌱 MASTER DATABASE SEEDING SCRIPT")
    print("=" * 60)
    print(f"Started at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    seeding_operations = [
        ("Creating Database Tables", create_tables),
        ("Creating Demo Users", seed_demo_users),
        ("Creating Demo Employees", seed_demo_employees),
        ("Creating Demo Tasks", seed_demo_tasks),
    ]

    failed_operations = []
    for description, operation in seeding_operations:
        if not operation():
            failed_operations.append(description)

    # Summary
    print(f"\n{'='*60}")
    print("📊 SEEDING SUMMARY")
    print(f"{'='*60}")
    print(f"Total Operations: {len(seeding_operations)}")
    print(f"Successful: {len(seeding_operations) - len(failed_operations)}")
    print(f"Failed: {len(failed_operations)}")

    if failed_operations:
        print(f"Failed Operations: {', '.join(failed_operations)}")
        print("\n[WARNING] Some seeding operations failed. Please check the errors above.")
        sys.exit(1)

    print("\n[SUCCESS] ALL SEEDING OPERATIONS COMPLETED SUCCESSFULLY!")
    print("\n[INFO] Login Credentials:")
    for user_data in DEMO_USERS:
        print(f"   - {user_data['role'].title()}: {user_data['email']} / {user_data['password']}")
    print(f"\nCompleted at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")


if __name__ == "__main__":
    main()
