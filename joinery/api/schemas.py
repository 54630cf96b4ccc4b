"""API request/response schemas."""

from __future__ import annotations

from joinery.models import CamelModel, WindowSpec
from joinery.services.cost_estimator import MaterialTier


class QuoteRequest(CamelModel):
    """Request body for the /projects/{id}/quote endpoint."""
    customer_name: str


class QuoteResponse(CamelModel):
    quote: str
    totals: dict[MaterialTier, float]
    window_count: int


class ImportResponse(CamelModel):
    """Response from the XML import endpoint."""
    project_name: str
    imported: list[WindowSpec]


class RuleInfo(CamelModel):
    id: str
    name: str
