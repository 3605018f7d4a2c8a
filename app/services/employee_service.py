import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, Query, selectinload

from app.models.employee import Employee, EmployeeStatus
from app.schemas.employee import EmployeeCreate, EmployeeUpdate
from app.utils.errors import DuplicateEmail, NotFound
from app.utils.pagination import like_pattern, optional_filter, order_clause, page_offset

logger = logging.getLogger(__name__)

EMPLOYEE_SORT_FIELDS = {
    "createdAt": Employee.created_at,
    "updatedAt": Employee.updated_at,
    "firstName": Employee.first_name,
    "lastName": Employee.last_name,
    "email": Employee.email,
    "department": Employee.department,
    "position": Employee.position,
    "salary": Employee.salary,
    "hireDate": Employee.hire_date,
    "status": Employee.status,
}

EMPLOYEE_STATUSES = [s.value for s in EmployeeStatus]


class EmployeeService:
    @staticmethod
    def filtered_query(
        db: Session,
        search: Optional[str] = None,
        department: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Query:
        """Employees matching the search term and exact department/status filters"""
        query = db.query(Employee)

        if search and search.strip():
            pattern = like_pattern(search.strip())
            query = query.filter(
                or_(
                    Employee.first_name.ilike(pattern, escape="\\"),
                    Employee.last_name.ilike(pattern, escape="\\"),
                    Employee.email.ilike(pattern, escape="\\"),
                    Employee.position.ilike(pattern, escape="\\"),
                )
            )

        if department and department.strip():
            query = query.filter(Employee.department == department.strip())

        status = optional_filter(status, EMPLOYEE_STATUSES, "status")
        if status:
            query = query.filter(Employee.status == status)

        return query

    @staticmethod
    def list_employees(
        db: Session,
        page: int,
        limit: int,
        search: Optional[str] = None,
        department: Optional[str] = None,
        status: Optional[str] = None,
        sort_by: str = "createdAt",
        order: str = "desc",
    ) -> Tuple[List[Employee], int]:
        ordering = order_clause(EMPLOYEE_SORT_FIELDS, sort_by, order)
        query = EmployeeService.filtered_query(db, search, department, status)

        total = query.count()
        employees = (
            query.options(selectinload(Employee.tasks))
            .order_by(ordering, Employee.id.desc())
            .offset(page_offset(page, limit))
            .limit(limit)
            .all()
        )
        return employees, total

    @staticmethod
    def all_matching(
        db: Session,
        search: Optional[str] = None,
        department: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Employee]:
        """Unpaginated variant of list_employees, newest first"""
        query = EmployeeService.filtered_query(db, search, department, status)
        return query.order_by(Employee.created_at.desc(), Employee.id.desc()).all()

    @staticmethod
    def get_employee(db: Session, employee_id: int) -> Employee:
        employee = db.query(Employee).filter(Employee.id == employee_id).first()
        if not employee:
            raise NotFound("Employee not found")
        return employee

    @staticmethod
    def _ensure_email_free(db: Session, email: str, exclude_id: Optional[int] = None):
        query = db.query(Employee.id).filter(Employee.email == email)
        if exclude_id is not None:
            query = query.filter(Employee.id != exclude_id)
        if query.first():
            raise DuplicateEmail("Employee with this email already exists")

    @staticmethod
    def create_employee(db: Session, data: EmployeeCreate) -> Employee:
        EmployeeService._ensure_email_free(db, data.email)

        employee = Employee(**data.model_dump())
        db.add(employee)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent insert of the same email
            db.rollback()
            raise DuplicateEmail("Employee with this email already exists")
        db.refresh(employee)

        logger.info(f"Employee {employee.id} created ({employee.email})")
        return employee

    @staticmethod
    def update_employee(db: Session, employee_id: int, data: EmployeeUpdate) -> Employee:
        employee = EmployeeService.get_employee(db, employee_id)

        update_data = data.model_dump(exclude_unset=True)
        new_email = update_data.get("email")
        if new_email and new_email != employee.email:
            EmployeeService._ensure_email_free(db, new_email, exclude_id=employee.id)

        for key, value in update_data.items():
            setattr(employee, key, value)

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateEmail("Email already in use")
        db.refresh(employee)

        logger.info(f"Employee {employee.id} updated: {sorted(update_data)}")
        return employee

    @staticmethod
    def delete_employee(db: Session, employee_id: int) -> int:
        """Delete an employee together with their tasks; returns the task count removed"""
        employee = EmployeeService.get_employee(db, employee_id)
        task_count = len(employee.tasks)

        db.delete(employee)
        db.commit()

        logger.info(f"Employee {employee_id} deleted along with {task_count} task(s)")
        return task_count

    @staticmethod
    def get_stats(db: Session) -> dict:
        total = db.query(func.count(Employee.id)).scalar() or 0
        active = (
            db.query(func.count(Employee.id))
            .filter(Employee.status == EmployeeStatus.ACTIVE.value)
            .scalar()
            or 0
        )
        on_leave = (
            db.query(func.count(Employee.id))
            .filter(Employee.status == EmployeeStatus.ON_LEAVE.value)
            .scalar()
            or 0
        )

        department_rows = (
            db.query(Employee.department, func.count(Employee.id))
            .group_by(Employee.department)
            .order_by(Employee.department)
            .all()
        )
        status_rows = (
            db.query(Employee.status, func.count(Employee.id))
            .group_by(Employee.status)
            .order_by(Employee.status)
            .all()
        )

        return {
            "total_employees": total,
            "active_employees": active,
            "inactive_employees": total - active,
            "on_leave_employees": on_leave,
            "department_stats": [{"department": d, "_count": c} for d, c in department_rows],
            "status_stats": [{"status": s, "_count": c} for s, c in status_rows],
        }
