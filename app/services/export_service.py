# app/services/export_service.py
# CSV exports of employees and tasks
import csv
import io
from datetime import datetime
from typing import Iterable

from fastapi.responses import Response

from app.models.employee import Employee
from app.models.task import Task

EMPLOYEE_COLUMNS = [
    "First Name", "Last Name", "Email", "Phone", "Department",
    "Position", "Salary", "Hire Date", "Status",
]

TASK_COLUMNS = [
    "Title", "Description", "Status", "Priority", "Due Date",
    "Employee", "Department", "Created At",
]


def _date(value) -> str:
    return value.strftime("%Y-%m-%d") if value else ""


def employees_to_csv(employees: Iterable[Employee]) -> str:
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(EMPLOYEE_COLUMNS)
    for emp in employees:
        writer.writerow([
            emp.first_name,
            emp.last_name,
            emp.email,
            emp.phone or "",
            emp.department,
            emp.position,
            emp.salary,
            _date(emp.hire_date),
            emp.status,
        ])

    content = output.getvalue()
    output.close()
    return content


def tasks_to_csv(tasks: Iterable[Task]) -> str:
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(TASK_COLUMNS)
    for task in tasks:
        employee = task.employee
        writer.writerow([
            task.title,
            task.description or "",
            task.status,
            task.priority,
            _date(task.due_date),
            employee.full_name if employee else "",
            employee.department if employee else "",
            _date(task.created_at),
        ])

    content = output.getvalue()
    output.close()
    return content


def csv_response(content: str, name: str) -> Response:
    filename = f"{name}_{datetime.now().strftime('%Y-%m-%d')}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
