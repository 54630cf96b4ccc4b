"""In-memory store for projects and their windows."""

from __future__ import annotations
import logging
from datetime import datetime, timezone

from joinery.core.errors import ProjectNotFoundError, WindowNotFoundError
from joinery.models import Project, ProjectCreate, WindowCreate, WindowSpec

logger = logging.getLogger("joinery.storage")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class MemoryStorage:
    """
    Project and window repository held in process memory.

    Ids are assigned sequentially from 1 and never reused. Windows
    must belong to an existing project; deleting a project deletes
    its windows.
    """

    def __init__(self, seed: bool = False) -> None:
        self._projects: dict[int, Project] = {}
        self._windows: dict[int, WindowSpec] = {}
        self._next_project_id = 1
        self._next_window_id = 1
        if seed:
            self.seed_sample_data()

    def seed_sample_data(self) -> Project:
        project = self.create_project(ProjectCreate(name="Untitled Project"))
        self.create_window(WindowCreate(
            project_id=project.id, name="Bedroom Window", type="double",
            width=1110, height=1130, glass_type="clear",
        ))
        self.create_window(WindowCreate(
            project_id=project.id, name="Kitchen Window", type="triple",
            width=1470, height=970, glass_type="clear",
        ))
        return project

    # Projects

    def list_projects(self) -> list[Project]:
        return list(self._projects.values())

    def get_project(self, project_id: int) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def create_project(self, data: ProjectCreate) -> Project:
        stamp = _now()
        project = Project(
            id=self._next_project_id, name=data.name, created_at=stamp, updated_at=stamp,
        )
        self._projects[project.id] = project
        self._next_project_id += 1
        logger.info("Created project %d (%s)", project.id, project.name)
        return project

    def update_project(self, project_id: int, data: ProjectCreate) -> Project:
        current = self.get_project(project_id)
        project = current.model_copy(update={"name": data.name, "updated_at": _now()})
        self._projects[project_id] = project
        logger.info("Updated project %d", project_id)
        return project

    def delete_project(self, project_id: int) -> None:
        self.get_project(project_id)
        orphaned = [w.id for w in self._windows.values() if w.project_id == project_id]
        for window_id in orphaned:
            del self._windows[window_id]
        del self._projects[project_id]
        logger.info("Deleted project %d and %d windows", project_id, len(orphaned))

    def touch_project(self, project_id: int) -> None:
        project = self.get_project(project_id)
        self._projects[project_id] = project.model_copy(update={"updated_at": _now()})

    # Windows

    def list_windows(self) -> list[WindowSpec]:
        return list(self._windows.values())

    def list_project_windows(self, project_id: int) -> list[WindowSpec]:
        self.get_project(project_id)
        return [w for w in self._windows.values() if w.project_id == project_id]

    def get_window(self, window_id: int) -> WindowSpec:
        window = self._windows.get(window_id)
        if window is None:
            raise WindowNotFoundError(window_id)
        return window

    def create_window(self, data: WindowCreate) -> WindowSpec:
        self.touch_project(data.project_id)
        window = WindowSpec(id=self._next_window_id, **data.model_dump())
        self._windows[window.id] = window
        self._next_window_id += 1
        logger.info("Created window %d (%s) in project %d", window.id, window.name, window.project_id)
        return window

    def update_window(self, window_id: int, data: WindowCreate) -> WindowSpec:
        self.get_window(window_id)
        self.touch_project(data.project_id)
        window = WindowSpec(id=window_id, **data.model_dump())
        self._windows[window_id] = window
        logger.info("Updated window %d", window_id)
        return window

    def delete_window(self, window_id: int) -> None:
        window = self.get_window(window_id)
        del self._windows[window_id]
        logger.info("Deleted window %d from project %d", window_id, window.project_id)
