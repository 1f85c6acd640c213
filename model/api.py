# model/api.py
from pydantic import BaseModel
from util.types import Catalog


class FilesResponse(BaseModel):
    files: list[str]


class CatalogResponse(BaseModel):
    categories: Catalog


class HealthResponse(BaseModel):
    ok: bool
