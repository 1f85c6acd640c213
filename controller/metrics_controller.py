# controller/metrics_controller.py
from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from controller.controller_dependencies import get_metrics_registry
from model.api import HealthResponse
from util.constants import InternalURIs

metrics_router = APIRouter()


@metrics_router.get(InternalURIs.METRICS)
async def metrics(
    registry: CollectorRegistry = Depends(get_metrics_registry),
) -> Response:
    return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)


@metrics_router.get(InternalURIs.HEALTHZ, response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(ok=True)
