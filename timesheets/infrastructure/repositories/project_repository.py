"""
Project repository implementation using SQLAlchemy.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from timesheets.domain.models.base import RepositoryError
from timesheets.domain.models.project import Project
from timesheets.domain.repositories.project_repository import ProjectRepository as ProjectRepositoryInterface
from timesheets.infrastructure.db.models import ProjectModel
from timesheets.infrastructure.mappers.project_mapper import ProjectMapper


logger = logging.getLogger(__name__)


class SQLAlchemyProjectRepository(ProjectRepositoryInterface):
    """SQLAlchemy implementation of project repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = ProjectMapper()

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        try:
            model = self.session.get(ProjectModel, project_id)
        except SQLAlchemyError as e:
            raise RepositoryError("find_by_id", project_id, e) from e
        return self.mapper.model_to_domain(model) if model else None

    async def save(self, project: Project) -> Project:
        try:
            model = self.session.get(ProjectModel, project.id)
            if model is None:
                self.session.add(self.mapper.domain_to_model(project))
            else:
                self.mapper.update_model(model, project)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to save project {project.id}: {e}")
            raise RepositoryError("save", project.id, e) from e
        return project
