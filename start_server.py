#!/usr/bin/env python3
"""
Startup script for the Employee Management API
This script starts the FastAPI server with proper configuration
"""

import uvicorn

from app.config.settings import settings


def main():
    print("Starting Employee Management API Server...")
    print(f"Host: {settings.host}")
    print(f"Port: {settings.port}")
    print(f"Reload: {settings.reload}")
    print(f"Environment: {settings.app_env}")
    print("=" * 50)

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
