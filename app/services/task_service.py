import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, Query, joinedload

from app.models.employee import Employee
from app.models.task import Task, TaskStatus, TaskPriority
from app.schemas.task import TaskCreate, TaskUpdate
from app.utils.errors import EmployeeNotFound, NotFound
from app.utils.pagination import optional_filter, order_clause, page_offset

logger = logging.getLogger(__name__)

TASK_SORT_FIELDS = {
    "createdAt": Task.created_at,
    "updatedAt": Task.updated_at,
    "title": Task.title,
    "status": Task.status,
    "priority": Task.priority,
    "dueDate": Task.due_date,
}

TASK_STATUSES = [s.value for s in TaskStatus]
TASK_PRIORITIES = [p.value for p in TaskPriority]


class TaskService:
    @staticmethod
    def filtered_query(db: Session, status: Optional[str] = None, priority: Optional[str] = None) -> Query:
        query = db.query(Task)

        status = optional_filter(status, TASK_STATUSES, "status")
        if status:
            query = query.filter(Task.status == status)

        priority = optional_filter(priority, TASK_PRIORITIES, "priority")
        if priority:
            query = query.filter(Task.priority == priority)

        return query

    @staticmethod
    def list_tasks(
        db: Session,
        page: int,
        limit: int,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        sort_by: str = "createdAt",
        order: str = "desc",
    ) -> Tuple[List[Task], int]:
        ordering = order_clause(TASK_SORT_FIELDS, sort_by, order)
        query = TaskService.filtered_query(db, status, priority)

        total = query.count()
        tasks = (
            query.options(joinedload(Task.employee))
            .order_by(ordering, Task.id.desc())
            .offset(page_offset(page, limit))
            .limit(limit)
            .all()
        )
        return tasks, total

    @staticmethod
    def all_matching(db: Session, status: Optional[str] = None, priority: Optional[str] = None) -> List[Task]:
        query = TaskService.filtered_query(db, status, priority)
        return (
            query.options(joinedload(Task.employee))
            .order_by(Task.created_at.desc(), Task.id.desc())
            .all()
        )

    @staticmethod
    def get_task(db: Session, task_id: int) -> Task:
        task = (
            db.query(Task)
            .options(joinedload(Task.employee))
            .filter(Task.id == task_id)
            .first()
        )
        if not task:
            raise NotFound("Task not found")
        return task

    @staticmethod
    def list_by_employee(db: Session, employee_id: int) -> List[Task]:
        """All tasks of one employee, newest first; unknown employees have none"""
        return (
            db.query(Task)
            .options(joinedload(Task.employee))
            .filter(Task.employee_id == employee_id)
            .order_by(Task.created_at.desc(), Task.id.desc())
            .all()
        )

    @staticmethod
    def _ensure_employee_exists(db: Session, employee_id: int):
        if not db.query(Employee.id).filter(Employee.id == employee_id).first():
            raise EmployeeNotFound("Employee not found")

    @staticmethod
    def create_task(db: Session, data: TaskCreate) -> Task:
        # Read-then-write without a lock: an employee deleted in between is not guarded
        TaskService._ensure_employee_exists(db, data.employee_id)

        task = Task(**data.model_dump())
        db.add(task)
        db.commit()
        db.refresh(task)

        logger.info(f"Task {task.id} created for employee {task.employee_id}")
        return task

    @staticmethod
    def update_task(db: Session, task_id: int, data: TaskUpdate) -> Task:
        task = TaskService.get_task(db, task_id)

        update_data = data.model_dump(exclude_unset=True)
        new_employee_id = update_data.get("employee_id")
        if new_employee_id is not None and new_employee_id != task.employee_id:
            TaskService._ensure_employee_exists(db, new_employee_id)

        for key, value in update_data.items():
            setattr(task, key, value)

        db.commit()
        db.refresh(task)

        logger.info(f"Task {task.id} updated: {sorted(update_data)}")
        return task

    @staticmethod
    def update_status(db: Session, task_id: int, status: str) -> Task:
        task = TaskService.get_task(db, task_id)
        old_status = task.status

        task.status = status
        db.commit()
        db.refresh(task)

        logger.info(f"Task {task.id} status changed {old_status} -> {task.status}")
        return task

    @staticmethod
    def delete_task(db: Session, task_id: int):
        task = TaskService.get_task(db, task_id)
        db.delete(task)
        db.commit()
        logger.info(f"Task {task_id} deleted")

    @staticmethod
    def get_stats(db: Session, now: Optional[datetime] = None) -> dict:
        now = now or datetime.utcnow()

        total = db.query(func.count(Task.id)).scalar() or 0
        status_rows = (
            db.query(Task.status, func.count(Task.id))
            .group_by(Task.status)
            .order_by(Task.status)
            .all()
        )
        priority_rows = (
            db.query(Task.priority, func.count(Task.id))
            .group_by(Task.priority)
            .order_by(Task.priority)
            .all()
        )
        # Cancelled tasks past their due date still count as overdue
        overdue = (
            db.query(func.count(Task.id))
            .filter(
                Task.due_date.isnot(None),
                Task.due_date < now,
                Task.status != TaskStatus.COMPLETED.value,
            )
            .scalar()
            or 0
        )

        return {
            "total_tasks": total,
            "status_stats": [{"status": s, "_count": c} for s, c in status_rows],
            "priority_stats": [{"priority": p, "_count": c} for p, c in priority_rows],
            "overdue_tasks": overdue,
        }
