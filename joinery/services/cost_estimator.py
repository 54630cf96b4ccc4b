"""Cost estimator: price table lookup, feature surcharges and quote text."""

from __future__ import annotations
from enum import Enum

from joinery.core.catalog import TypeCatalog, default_catalog
from joinery.models import CamelModel, Category, OpeningSide, WindowDesign, round_half_up

# Per square metre, softwood
AREA_RATES: dict[str, float] = {
    "single": 350.0,
    "double": 400.0,
    "triple": 450.0,
    "single-transom": 500.0,
    "double-transom": 500.0,
    "triple-transom": 500.0,
    "quad": 550.0,
    "quad-transom": 550.0,
}
DEFAULT_AREA_RATE = 300.0

# Per door, softwood
DOOR_PRICES: dict[str, float] = {
    "door-fully-boarded": 800.0,
    "door-full-glazed": 900.0,
    "door-half-glazed": 950.0,
    "door-6-panel": 1000.0,
}

GEORGIAN_BAR_RATE = 50.0       # per horizontal x vertical bar
SPECIAL_GLASS_SURCHARGE = 30.0
OPENING_CASEMENT_RATE = 40.0
TOP_OPENING_RATE = 45.0


class MaterialTier(str, Enum):
    SOFTWOOD = "softwood"
    HARDWOOD = "hardwood"
    HYBRID = "hybrid"

    @property
    def multiplier(self) -> float:
        return {"softwood": 1.0, "hardwood": 1.2, "hybrid": 1.4}[self.value]

    @property
    def description(self) -> str:
        return {
            "softwood": "Softwood with hardwood sills/beads",
            "hardwood": "All hardwood",
            "hybrid": "Hardwood frames with Accoya doors and casements",
        }[self.value]


class WindowCostLine(CamelModel):
    window_id: int | None = None
    name: str
    type: str
    area_m2: float
    base_cost: float
    feature_cost: float
    total: float


class CostEstimate(CamelModel):
    tier: MaterialTier
    lines: list[WindowCostLine]
    total: float


class CostEstimator:
    """Prices window designs by type, size, features and material tier."""

    def __init__(self, catalog: TypeCatalog | None = None) -> None:
        self.catalog = catalog or default_catalog

    def base_cost(self, window: WindowDesign, tier: MaterialTier) -> float:
        if window.type in DOOR_PRICES:
            cost = DOOR_PRICES[window.type]
        else:
            area = (window.width / 1000) * (window.height / 1000)
            cost = AREA_RATES.get(window.type, DEFAULT_AREA_RATE) * area
        return cost * tier.multiplier

    def feature_cost(self, window: WindowDesign) -> float:
        cost = 0.0

        if window.has_georgian_bars:
            horizontal = 1 if window.georgian_bars_horizontal is None else window.georgian_bars_horizontal
            vertical = 1 if window.georgian_bars_vertical is None else window.georgian_bars_vertical
            cost += GEORGIAN_BAR_RATE * horizontal * vertical

        if window.glass_type.strip().lower() != "clear":
            cost += SPECIAL_GLASS_SURCHARGE

        cost += OPENING_CASEMENT_RATE * self._opening_count(window.openable_casements, OpeningSide.LEFT)

        entry = self.catalog.get(window.type)
        if entry is not None and entry.has_transom:
            cost += TOP_OPENING_RATE * self._opening_count(
                window.top_casements_openable, OpeningSide.NONE,
            )

        return cost

    def _opening_count(self, raw: str | None, default: OpeningSide) -> int:
        side = default if raw is None else OpeningSide.parse(raw)
        if side == OpeningSide.NONE:
            return 0
        return 2 if side == OpeningSide.BOTH else 1

    def price_window(self, window: WindowDesign, tier: MaterialTier) -> WindowCostLine:
        base = self.base_cost(window, tier)
        features = self.feature_cost(window)
        return WindowCostLine(
            window_id=getattr(window, "id", None),
            name=window.name,
            type=window.type,
            area_m2=(window.width / 1000) * (window.height / 1000),
            base_cost=base,
            feature_cost=features,
            total=base + features,
        )

    def estimate(self, windows: list[WindowDesign], tier: MaterialTier) -> CostEstimate:
        lines = [self.price_window(w, tier) for w in windows]
        return CostEstimate(tier=tier, lines=lines, total=sum(line.total for line in lines))

    def summarize_types(self, windows: list[WindowDesign]) -> dict[str, int]:
        """Count windows by the loose groups used in customer quotes."""
        counts: dict[str, int] = {}
        for window in windows:
            entry = self.catalog.get(window.type)
            if entry is not None and entry.has_transom:
                group = "transom window"
            elif window.type in ("single", "double", "triple", "quad"):
                group = f"{window.type} casement window"
            elif entry is not None and entry.category == Category.DOOR and entry.id != "patio":
                group = "door"
            else:
                group = window.type
            counts[group] = counts.get(group, 0) + 1
        return counts

    def quote_email(
        self,
        customer_name: str,
        project_name: str,
        windows: list[WindowDesign],
        signature: str = "Tom",
        currency: str = "£",
    ) -> str:
        summary = ", ".join(
            f"{count}no {group}" for group, count in self.summarize_types(windows).items()
        )
        prices = "\n".join(
            f"{tier.description}: {currency}{round_half_up(self.estimate(windows, tier).total):,} + VAT"
            for tier in MaterialTier
        )
        return (
            f"Hi {customer_name},\n"
            "\n"
            "Thanks for the email.\n"
            "\n"
            f"Here are some options for your {project_name} project. The prices are "
            "estimates as I haven't seen the windows to quote accurately.\n"
            "\n"
            f"Supply only {summary}. Including sealed glass units, ironmongery, "
            "and 1 coat of primer.\n"
            f"{prices}\n"
            "\n"
            "Accoya is an amazing timber that will basically never rot, extremely "
            "dimensionally stable, and holds paint better. Our most common windows now "
            "use hardwood for the framework and Accoya for the casements and doors. "
            "www.accoya.co.uk\n"
            "\n"
            "Regards,\n"
            f"{signature}"
        )
