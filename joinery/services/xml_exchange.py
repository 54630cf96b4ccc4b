"""XML project export and import."""

from __future__ import annotations
import logging
from xml.etree import ElementTree as ET

from pydantic import ValidationError

from joinery.core.errors import XmlImportError
from joinery.models import WindowDesign, WindowSpec

logger = logging.getLogger("joinery.xml")

# Element name -> (attribute, default written on export)
WINDOW_FIELDS: list[tuple[str, str, object]] = [
    ("name", "name", None),
    ("type", "type", None),
    ("width", "width", None),
    ("height", "height", None),
    ("glassType", "glass_type", None),
    ("hasGeorgianBars", "has_georgian_bars", False),
    ("georgianBarsHorizontal", "georgian_bars_horizontal", 1),
    ("georgianBarsVertical", "georgian_bars_vertical", 1),
    ("openableCasements", "openable_casements", "left"),
    ("hasTransom", "has_transom", False),
    ("transomHeight", "transom_height", 400),
    ("topCasementsOpenable", "top_casements_openable", "none"),
    ("positionX", "position_x", 0),
    ("positionY", "position_y", 0),
]


def _text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def export_project_xml(project_name: str, windows: list[WindowSpec]) -> str:
    """Serialise a project's windows; missing optional values get their defaults."""
    root = ET.Element("project", {"name": project_name})
    for window in windows:
        node = ET.SubElement(root, "window")
        ET.SubElement(node, "id").text = str(window.id)
        ET.SubElement(node, "projectId").text = str(window.project_id)
        for tag, attr, default in WINDOW_FIELDS:
            value = getattr(window, attr)
            ET.SubElement(node, tag).text = _text(default if value is None else value)
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body


def _bool(raw: str) -> bool:
    return raw.strip().lower() in ("true", "1", "yes")


def import_project_xml(xml: str | bytes) -> tuple[str, list[WindowDesign]]:
    """
    Parse an exported project, given as text or as raw request bytes.

    Returns the project name and the window designs found, with ids and
    project ids dropped so the caller can attach them anywhere.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as exc:
        raise XmlImportError(f"Malformed XML: {exc}") from exc

    if root.tag != "project":
        raise XmlImportError(f"Expected a <project> root element, found <{root.tag}>")

    project_name = root.get("name", "Imported Project")
    designs: list[WindowDesign] = []
    for position, node in enumerate(root.findall("window"), start=1):
        values: dict[str, object] = {}
        for tag, attr, _default in WINDOW_FIELDS:
            child = node.find(tag)
            if child is None or child.text is None:
                continue
            text = child.text.strip()
            if attr.startswith("has_"):
                values[attr] = _bool(text)
            else:
                values[attr] = text
        try:
            designs.append(WindowDesign(**values))
        except ValidationError as exc:
            raise XmlImportError(f"Window #{position} is invalid: {exc.errors()[0]['msg']}") from exc

    logger.info("Parsed %d windows from XML project %r", len(designs), project_name)
    return project_name, designs
