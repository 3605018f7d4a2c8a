from .common import ApiResponse, Pagination
from .user import UserRegister, UserLogin, UserOut
from .tokens import AuthData
from .task import TaskCreate, TaskUpdate, TaskStatusUpdate, TaskBrief, TaskOut, TaskListItem, TaskDetail, TaskStats
from .employee import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeBrief,
    EmployeeOut,
    EmployeeListItem,
    EmployeeDetail,
    EmployeeStats,
)

_employee_refs = {"EmployeeBrief": EmployeeBrief, "EmployeeOut": EmployeeOut}
TaskListItem.model_rebuild(_types_namespace=_employee_refs)
TaskDetail.model_rebuild(_types_namespace=_employee_refs)
