"""
Project mapper for converting between domain entities and database models.
"""

from timesheets.domain.models.project import Project
from timesheets.infrastructure.db.models import ProjectModel
from timesheets.infrastructure.mappers.base_mapper import (
    from_storage_datetime,
    to_decimal,
    to_storage_datetime
)


class ProjectMapper:
    """Maps between Project domain entity and ProjectModel database model."""

    def domain_to_model(self, project: Project) -> ProjectModel:
        model = ProjectModel(id=project.id)
        self.update_model(model, project)
        return model

    def update_model(self, model: ProjectModel, project: Project) -> None:
        model.name = project.name
        model.client = project.client
        model.budget = project.budget
        model.start_date = project.start_date
        model.end_date = project.end_date
        model.status = project.status
        model.total_hours = project.total_hours
        model.created_at = to_storage_datetime(project.created_at)
        model.updated_at = to_storage_datetime(project.updated_at)

    def model_to_domain(self, model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            name=model.name,
            client=model.client or "",
            budget=to_decimal(model.budget),
            start_date=model.start_date,
            end_date=model.end_date,
            status=model.status,
            total_hours=to_decimal(model.total_hours),
            created_at=from_storage_datetime(model.created_at),
            updated_at=from_storage_datetime(model.updated_at)
        )
