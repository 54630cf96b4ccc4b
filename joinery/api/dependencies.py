"""FastAPI dependency injection for the designer services."""

from __future__ import annotations
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from joinery.config import Settings
from joinery.services.cost_estimator import CostEstimator
from joinery.services.drawing_service import DrawingService
from joinery.services.pdf_export import PdfExporter
from joinery.services.storage import MemoryStorage


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_storage() -> MemoryStorage:
    return MemoryStorage(seed=get_settings().seed_sample_data)


@lru_cache(maxsize=1)
def get_drawing_service() -> DrawingService:
    return DrawingService()


@lru_cache(maxsize=1)
def get_cost_estimator() -> CostEstimator:
    return CostEstimator()


def get_pdf_exporter() -> PdfExporter:
    return PdfExporter()


SettingsDep = Annotated[Settings, Depends(get_settings)]
StorageDep = Annotated[MemoryStorage, Depends(get_storage)]
DrawingServiceDep = Annotated[DrawingService, Depends(get_drawing_service)]
CostEstimatorDep = Annotated[CostEstimator, Depends(get_cost_estimator)]
PdfExporterDep = Annotated[PdfExporter, Depends(get_pdf_exporter)]
