# controller/file_controller.py
from fastapi import APIRouter, Depends, Response
from controller.controller_dependencies import get_file_service, rate_limiter
from core.entities import RetrievalResult
from model.api import CatalogResponse, FilesResponse
from service.file_service import FileService
from util.constants import Headers, InternalURIs

file_router = APIRouter(dependencies=[Depends(rate_limiter)])


def _file_response(result: RetrievalResult) -> Response:
    return Response(
        content=result.body,
        media_type=result.content_type,
        headers={Headers.CACHE_STATUS: result.cache_status.header},
    )


@file_router.get(InternalURIs.FILES, response_model=FilesResponse)
async def list_files(
    service: FileService = Depends(get_file_service),
) -> FilesResponse:
    return FilesResponse(files=await service.list_files())


@file_router.get(InternalURIs.FILES_CATEGORIZED, response_model=CatalogResponse)
async def list_categorized_files(
    service: FileService = Depends(get_file_service),
) -> CatalogResponse:
    return CatalogResponse(categories=await service.catalog())


# Registered before the flat route so "<category>/<filename>" binds here.
@file_router.get(InternalURIs.DOWNLOAD_CATEGORIZED)
async def download_categorized_file(
    category: str,
    filename: str,
    service: FileService = Depends(get_file_service),
) -> Response:
    return _file_response(await service.retrieve(category, filename))


@file_router.get(InternalURIs.DOWNLOAD_FLAT)
async def download_file(
    path: str,
    service: FileService = Depends(get_file_service),
) -> Response:
    return _file_response(await service.retrieve_path(path))
