# app/routers/employee.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeOut,
    EmployeeListItem,
    EmployeeDetail,
    EmployeeStats,
)
from app.services.employee_service import EmployeeService
from app.services.export_service import employees_to_csv, csv_response
from app.utils.auth import CurrentUser, get_current_user, require_admin
from app.utils.errors import unhandled
from app.utils.pagination import build_pagination, DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

# Every employee route needs a valid token; writes additionally need the admin role
router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/stats", response_model=ApiResponse[EmployeeStats])
def get_employee_stats(db: Session = Depends(get_db)):
    try:
        return ApiResponse(data=EmployeeStats(**EmployeeService.get_stats(db)))
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "computing employee stats", db)


@router.get("/export")
def export_employees(
    search: Optional[str] = None,
    department: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Download the (filtered) employee directory as CSV"""
    try:
        employees = EmployeeService.all_matching(db, search, department, status)
        return csv_response(employees_to_csv(employees), "employees")
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "exporting employees", db)


@router.get("", response_model=ApiResponse[List[EmployeeListItem]])
def list_employees(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    search: Optional[str] = None,
    department: Optional[str] = None,
    status: Optional[str] = None,
    sort_by: str = Query("createdAt", alias="sortBy"),
    order: str = "desc",
    db: Session = Depends(get_db),
):
    try:
        employees, total = EmployeeService.list_employees(
            db, page, limit,
            search=search,
            department=department,
            status=status,
            sort_by=sort_by,
            order=order,
        )
        return ApiResponse(
            data=[EmployeeListItem.model_validate(e) for e in employees],
            pagination=build_pagination(total, page, limit),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "listing employees", db)


@router.get("/{employee_id}", response_model=ApiResponse[EmployeeDetail])
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    try:
        employee = EmployeeService.get_employee(db, employee_id)
        return ApiResponse(data=EmployeeDetail.model_validate(employee))
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "fetching employee", db)


@router.post("", response_model=ApiResponse[EmployeeOut], status_code=status.HTTP_201_CREATED)
def create_employee(
    employee: EmployeeCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    try:
        db_employee = EmployeeService.create_employee(db, employee)
        return ApiResponse(
            message="Employee created successfully",
            data=EmployeeOut.model_validate(db_employee),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "creating employee", db)


@router.put("/{employee_id}", response_model=ApiResponse[EmployeeOut])
def update_employee(
    employee_id: int,
    employee_update: EmployeeUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    try:
        db_employee = EmployeeService.update_employee(db, employee_id, employee_update)
        return ApiResponse(
            message="Employee updated successfully",
            data=EmployeeOut.model_validate(db_employee),
        )
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "updating employee", db)


@router.delete("/{employee_id}", response_model=ApiResponse)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    try:
        EmployeeService.delete_employee(db, employee_id)
        return ApiResponse(message="Employee deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        raise unhandled(e, "deleting employee", db)
