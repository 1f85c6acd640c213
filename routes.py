# routes.py
from fastapi import FastAPI
from controller.file_controller import file_router
from controller.metrics_controller import metrics_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(file_router)
    app.include_router(metrics_router)
