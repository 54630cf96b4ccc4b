"""Tests for the in-memory project/window store."""

from __future__ import annotations

import pytest

from joinery.core.errors import ProjectNotFoundError, WindowNotFoundError
from joinery.models import ProjectCreate, WindowCreate
from joinery.services.storage import MemoryStorage


class TestSeed:

    def test_sample_project(self, seeded_storage: MemoryStorage) -> None:
        (project,) = seeded_storage.list_projects()
        assert project.name == "Untitled Project"
        windows = seeded_storage.list_project_windows(project.id)
        assert [(w.name, w.type, w.width, w.height) for w in windows] == [
            ("Bedroom Window", "double", 1110, 1130),
            ("Kitchen Window", "triple", 1470, 970),
        ]

    def test_unseeded_is_empty(self, storage: MemoryStorage) -> None:
        assert storage.list_projects() == []
        assert storage.list_windows() == []


class TestProjects:

    def test_create_assigns_sequential_ids(self, storage: MemoryStorage) -> None:
        first = storage.create_project(ProjectCreate(name="A"))
        second = storage.create_project(ProjectCreate())
        assert (first.id, second.id) == (1, 2)
        assert second.name == "Untitled Project"
        assert first.created_at == first.updated_at

    def test_update_renames(self, storage: MemoryStorage) -> None:
        project = storage.create_project(ProjectCreate(name="A"))
        updated = storage.update_project(project.id, ProjectCreate(name="B"))
        assert updated.name == "B"
        assert updated.created_at == project.created_at
        assert storage.get_project(project.id).name == "B"

    def test_missing_project(self, storage: MemoryStorage) -> None:
        with pytest.raises(ProjectNotFoundError):
            storage.get_project(99)
        with pytest.raises(ProjectNotFoundError):
            storage.list_project_windows(99)

    def test_delete_cascades(self, seeded_storage: MemoryStorage) -> None:
        other = seeded_storage.create_project(ProjectCreate(name="Other"))
        kept = seeded_storage.create_window(WindowCreate(project_id=other.id, width=600, height=900))
        seeded_storage.delete_project(1)
        assert [p.id for p in seeded_storage.list_projects()] == [other.id]
        assert seeded_storage.list_windows() == [kept]
        with pytest.raises(WindowNotFoundError):
            seeded_storage.get_window(1)


class TestWindows:

    def test_create_requires_project(self, storage: MemoryStorage) -> None:
        with pytest.raises(ProjectNotFoundError):
            storage.create_window(WindowCreate(project_id=5, width=600, height=900))

    def test_ids_not_reused(self, seeded_storage: MemoryStorage) -> None:
        seeded_storage.delete_window(2)
        window = seeded_storage.create_window(WindowCreate(project_id=1, width=600, height=900))
        assert window.id == 3

    def test_update_replaces_record(self, seeded_storage: MemoryStorage) -> None:
        updated = seeded_storage.update_window(
            1, WindowCreate(project_id=1, name="Landing", type="single", width=600, height=900),
        )
        assert updated.id == 1
        assert seeded_storage.get_window(1).name == "Landing"

    def test_update_missing_window(self, seeded_storage: MemoryStorage) -> None:
        with pytest.raises(WindowNotFoundError):
            seeded_storage.update_window(42, WindowCreate(project_id=1, width=600, height=900))

    def test_delete_missing_window(self, storage: MemoryStorage) -> None:
        with pytest.raises(WindowNotFoundError):
            storage.delete_window(1)
