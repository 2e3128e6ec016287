from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scholarfolio.models import Project
from scholarfolio.schemas import ProjectDescription
from scholarfolio.services.resource_store import ResourceStore, store_errors


class ProjectStore(ResourceStore[Project]):
    """Projects keyed by owner email, with the description sheet as a sub-resource."""

    def __init__(self) -> None:
        super().__init__(
            Project,
            owner=Project.owner_email,
            order_by=(Project.id.asc(),),
            noun="project",
            plural="projects",
        )

    async def get_description(self, db: AsyncSession, project_id: int) -> dict:
        """camelCase description sheet, or {} when the project does not exist."""
        async with store_errors(db, "Error fetching description."):
            project = await db.get(Project, project_id)
        if project is None:
            return {}
        return ProjectDescription.model_validate(project).model_dump(by_alias=True)

    async def update_description(
        self, db: AsyncSession, project_id: int, description: ProjectDescription
    ) -> tuple[int, dict]:
        """Overwrite every description field, then re-read the row."""
        async with store_errors(db, "Error updating description."):
            result = await db.execute(
                update(Project).where(Project.id == project_id).values(**description.model_dump())
            )
            await db.commit()
            refreshed = await db.execute(
                select(Project)
                .where(Project.id == project_id)
                .execution_options(populate_existing=True)
            )
            project = refreshed.scalar_one_or_none()
        if project is None:
            return result.rowcount, {}
        return result.rowcount, ProjectDescription.model_validate(project).model_dump(by_alias=True)
