import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.settings import settings
from app.database import create_all_tables
from app.routers import auth, employee, task
from app.utils.errors import unhandled

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

app = FastAPI(title="Employee Management API", version=API_VERSION)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def describe_validation_errors(errors) -> str:
    """Turn pydantic errors into a single client-facing message"""
    missing = []
    invalid = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        if error.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append(f"{field}: {error.get('msg')}")

    parts = []
    if missing:
        parts.append(f"Missing required fields: {', '.join(missing)}")
    if invalid:
        parts.append(f"Invalid fields: {'; '.join(invalid)}")
    return ". ".join(parts) or "Invalid request data"


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(400, describe_validation_errors(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    error = unhandled(exc, f"handling {request.method} {request.url.path}")
    return error_response(error.status_code, error.detail)


# Route registration
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(employee.router, prefix="/api/employees", tags=["Employees"])
app.include_router(task.router, prefix="/api/tasks", tags=["Tasks"])


@app.on_event("startup")
def startup_event():
    logger.info(f"Starting Employee Management API ({settings.app_env})")
    create_all_tables()


# Root route
@app.get("/")
def read_root():
    return {
        "message": "Employee Management API",
        "version": API_VERSION,
        "endpoints": {
            "auth": "/api/auth",
            "employees": "/api/employees",
            "tasks": "/api/tasks",
        },
    }


@app.get("/health")
def health():
    return {"status": "ok"}
