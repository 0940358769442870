"""Project repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from timesheets.domain.models.project import Project


class ProjectRepository(ABC):
    """
    Repository interface for Project entity.
    """

    @abstractmethod
    async def find_by_id(self, project_id: str) -> Optional[Project]:
        """
        Find a project by ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        pass
