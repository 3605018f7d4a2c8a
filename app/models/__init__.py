from .user import User, UserRole
from .employee import Employee, EmployeeStatus
from .task import Task, TaskStatus, TaskPriority
