"""FastAPI route definitions."""

from __future__ import annotations
import re
from urllib.parse import quote

from fastapi import APIRouter, Request, Response

from joinery.api.dependencies import (
    CostEstimatorDep, DrawingServiceDep, PdfExporterDep, SettingsDep, StorageDep,
)
from joinery.api.schemas import ImportResponse, QuoteRequest, QuoteResponse, RuleInfo
from joinery.core.errors import UnknownWindowTypeError
from joinery.models import (
    Category, Project, ProjectCreate, SceneGraph, TypeCatalogEntry,
    WindowCreate, WindowDesign, WindowSpec,
)
from joinery.services.cost_estimator import CostEstimate, MaterialTier
from joinery.services.xml_exchange import export_project_xml, import_project_xml

router = APIRouter()


def _filename(name: str, suffix: str) -> str:
    """ASCII-only download name; headers must stay latin-1 encodable."""
    stem = re.sub(r"\s+", "_", name.strip())
    stem = re.sub(r"[^\w.-]", "", stem, flags=re.ASCII).strip("_")
    return f"{stem or 'project'}{suffix}"


def _attachment(name: str, suffix: str) -> str:
    """Content-Disposition with an ASCII fallback and the UTF-8 name (RFC 6266)."""
    utf8_name = quote(re.sub(r"\s+", "_", name.strip()) + suffix, safe="")
    ascii_name = _filename(name, suffix)
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{utf8_name}"


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules(service: DrawingServiceDep) -> list[RuleInfo]:
    """List all registered drawing rules."""
    return [RuleInfo(**r) for r in service.list_rules()]


# Catalog

@router.get("/window-types", response_model=list[TypeCatalogEntry])
async def list_window_types(
    service: DrawingServiceDep, category: Category | None = None,
) -> list[TypeCatalogEntry]:
    return service.list_types(category)


@router.get("/window-types/{type_id}", response_model=TypeCatalogEntry)
async def get_window_type(type_id: str, service: DrawingServiceDep) -> TypeCatalogEntry:
    entry = service.catalog.get(type_id)
    if entry is None:
        raise UnknownWindowTypeError(type_id)
    return entry


# Drawings

@router.post("/render", response_model=SceneGraph)
async def render_design(design: WindowDesign, service: DrawingServiceDep) -> SceneGraph:
    """Draw an unsaved window design."""
    return service.render(design)


@router.get("/windows/{window_id}/drawing", response_model=SceneGraph)
async def window_drawing(
    window_id: int, storage: StorageDep, service: DrawingServiceDep,
) -> SceneGraph:
    return service.render(storage.get_window(window_id))


@router.get("/windows/{window_id}/drawing.svg")
async def window_drawing_svg(
    window_id: int, storage: StorageDep, service: DrawingServiceDep,
) -> Response:
    svg = service.render_svg(storage.get_window(window_id))
    return Response(content=svg, media_type="image/svg+xml")


# Windows

@router.get("/windows", response_model=list[WindowSpec])
async def list_windows(storage: StorageDep) -> list[WindowSpec]:
    return storage.list_windows()


@router.get("/windows/{window_id}", response_model=WindowSpec)
async def get_window(window_id: int, storage: StorageDep) -> WindowSpec:
    return storage.get_window(window_id)


@router.post("/windows", response_model=WindowSpec, status_code=201)
async def create_window(
    data: WindowCreate, storage: StorageDep, service: DrawingServiceDep,
) -> WindowSpec:
    service.validate(data)
    return storage.create_window(data)


@router.put("/windows/{window_id}", response_model=WindowSpec)
async def update_window(
    window_id: int, data: WindowCreate, storage: StorageDep, service: DrawingServiceDep,
) -> WindowSpec:
    storage.get_window(window_id)
    service.validate(data)
    return storage.update_window(window_id, data)


@router.delete("/windows/{window_id}", status_code=204)
async def delete_window(window_id: int, storage: StorageDep) -> Response:
    storage.delete_window(window_id)
    return Response(status_code=204)


# Projects

@router.get("/projects", response_model=list[Project])
async def list_projects(storage: StorageDep) -> list[Project]:
    return storage.list_projects()


@router.post("/projects", response_model=Project, status_code=201)
async def create_project(data: ProjectCreate, storage: StorageDep) -> Project:
    return storage.create_project(data)


@router.get("/projects/{project_id}", response_model=Project)
async def get_project(project_id: int, storage: StorageDep) -> Project:
    return storage.get_project(project_id)


@router.put("/projects/{project_id}", response_model=Project)
async def update_project(project_id: int, data: ProjectCreate, storage: StorageDep) -> Project:
    return storage.update_project(project_id, data)


@router.delete("/projects/{project_id}", status_code=204)
async def delete_project(project_id: int, storage: StorageDep) -> Response:
    storage.delete_project(project_id)
    return Response(status_code=204)


@router.get("/projects/{project_id}/windows", response_model=list[WindowSpec])
async def list_project_windows(project_id: int, storage: StorageDep) -> list[WindowSpec]:
    return storage.list_project_windows(project_id)


# Estimates and quotes

@router.get("/projects/{project_id}/estimate", response_model=CostEstimate)
async def estimate_project(
    project_id: int,
    storage: StorageDep,
    estimator: CostEstimatorDep,
    tier: MaterialTier = MaterialTier.SOFTWOOD,
) -> CostEstimate:
    return estimator.estimate(storage.list_project_windows(project_id), tier)


@router.post("/projects/{project_id}/quote", response_model=QuoteResponse)
async def quote_project(
    project_id: int,
    body: QuoteRequest,
    storage: StorageDep,
    estimator: CostEstimatorDep,
    settings: SettingsDep,
) -> QuoteResponse:
    project = storage.get_project(project_id)
    windows = storage.list_project_windows(project_id)
    quote = estimator.quote_email(
        body.customer_name, project.name, windows,
        signature=settings.quote_signature, currency=settings.currency_symbol,
    )
    return QuoteResponse(
        quote=quote,
        totals={tier: estimator.estimate(windows, tier).total for tier in MaterialTier},
        window_count=len(windows),
    )


# Export / import

@router.get("/projects/{project_id}/export.xml")
async def export_project(project_id: int, storage: StorageDep) -> Response:
    project = storage.get_project(project_id)
    xml = export_project_xml(project.name, storage.list_project_windows(project_id))
    return Response(
        content=xml,
        media_type="application/xml",
        headers={
            "Content-Disposition": _attachment(project.name, "_windows.xml"),
        },
    )


@router.post("/projects/{project_id}/import", response_model=ImportResponse, status_code=201)
async def import_project(
    project_id: int, request: Request, storage: StorageDep, service: DrawingServiceDep,
) -> ImportResponse:
    """Append the windows of an exported XML project to this project."""
    storage.get_project(project_id)
    project_name, designs = import_project_xml(await request.body())

    for design in designs:
        service.validate(design)
    imported = [
        storage.create_window(WindowCreate(project_id=project_id, **design.model_dump()))
        for design in designs
    ]
    return ImportResponse(project_name=project_name, imported=imported)


@router.get("/projects/{project_id}/export.pdf")
async def export_project_pdf(
    project_id: int,
    storage: StorageDep,
    service: DrawingServiceDep,
    exporter: PdfExporterDep,
) -> Response:
    project = storage.get_project(project_id)
    scenes = [service.render(w) for w in storage.list_project_windows(project_id)]
    pdf = exporter.export(project.name, scenes)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={
            "Content-Disposition": _attachment(project.name, ".pdf"),
        },
    )
