# app/routers/task.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.task import (
    TaskCreate,
    TaskUpdate,
    TaskStatusUpdate,
    TaskListItem,
    TaskDetail,
    TaskStats,
)
from app.services.export_service import tasks_to_csv, csv_response
from app.services.task_service import TaskService
from app.utils.auth import CurrentUser, get_current_user, require_admin
from app.utils.errors import unhandled
from app.utils.pagination import build_pagination, DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/stats", response_model=ApiResponse[TaskStats])
def get_task_stats(db: Session = Depends(get_db)):
    try:
        return ApiResponse(data=TaskStats(**TaskService.get_stats(db)))
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "computing task stats", db)


@router.get("/export")
def export_tasks(
    status: Optional[str] = None,
    priority: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Download tasks (optionally filtered) as CSV"""
    try:
        tasks = TaskService.all_matching(db, status, priority)
        return csv_response(tasks_to_csv(tasks), "tasks")
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "exporting tasks", db)


@router.get("/employee/{employee_id}", response_model=ApiResponse[List[TaskListItem]])
def get_tasks_by_employee(employee_id: int, db: Session = Depends(get_db)):
    try:
        tasks = TaskService.list_by_employee(db, employee_id)
        return ApiResponse(data=[TaskListItem.model_validate(t) for t in tasks])
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "fetching employee tasks", db)


@router.get("", response_model=ApiResponse[List[TaskListItem]])
def list_tasks(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    status: Optional[str] = None,
    priority: Optional[str] = None,
    sort_by: str = Query("createdAt", alias="sortBy"),
    order: str = "desc",
    db: Session = Depends(get_db),
):
    try:
        tasks, total = TaskService.list_tasks(
            db, page, limit,
            status=status,
            priority=priority,
            sort_by=sort_by,
            order=order,
        )
        return ApiResponse(
            data=[TaskListItem.model_validate(t) for t in tasks],
            pagination=build_pagination(total, page, limit),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "listing tasks", db)


@router.get("/{task_id}", response_model=ApiResponse[TaskDetail])
def get_task(task_id: int, db: Session = Depends(get_db)):
    try:
        task = TaskService.get_task(db, task_id)
        return ApiResponse(data=TaskDetail.model_validate(task))
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "fetching task", db)


@router.post("", response_model=ApiResponse[TaskListItem], status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    try:
        db_task = TaskService.create_task(db, task)
        return ApiResponse(
            message="Task created successfully",
            data=TaskListItem.model_validate(db_task),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "creating task", db)


@router.put("/{task_id}", response_model=ApiResponse[TaskListItem])
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    try:
        db_task = TaskService.update_task(db, task_id, task_update)
        return ApiResponse(
            message="Task updated successfully",
            data=TaskListItem.model_validate(db_task),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "updating task", db)


@router.patch("/{task_id}/status", response_model=ApiResponse[TaskListItem])
def update_task_status(
    task_id: int,
    status_update: TaskStatusUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    """Status-only change used by the kanban board"""
    try:
        db_task = TaskService.update_status(db, task_id, status_update.status)
        return ApiResponse(
            message="Task status updated successfully",
            data=TaskListItem.model_validate(db_task),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "updating task status", db)


@router.delete("/{task_id}", response_model=ApiResponse)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    try:
        TaskService.delete_task(db, task_id)
        return ApiResponse(message="Task deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "deleting task", db)
