from fastapi import APIRouter

from scholarfolio.api.deps import DbSession
from scholarfolio.schemas import ProjectCreate, ProjectDescription, ProjectUpdate
from scholarfolio.services import projects

router = APIRouter()


@router.post("")
async def create_project(data: ProjectCreate, db: DbSession):
    project = await projects.create(db, data.model_dump())
    return project.to_dict()


@router.get("/{email}")
async def list_projects(email: str, db: DbSession):
    return [project.to_dict() for project in await projects.list_for_owner(db, email)]


@router.put("/{project_id}")
async def update_project(project_id: int, data: ProjectUpdate, db: DbSession):
    updated = await projects.update(db, project_id, data.model_dump())
    return {"updated": updated}


@router.delete("/{project_id}")
async def delete_project(project_id: int, db: DbSession):
    return {"deleted": await projects.delete(db, project_id)}


@router.get("/{project_id}/description")
async def get_description(project_id: int, db: DbSession):
    return await projects.get_description(db, project_id)


@router.put("/{project_id}/description")
async def update_description(project_id: int, data: ProjectDescription, db: DbSession):
    updated, description = await projects.update_description(db, project_id, data)
    return {"updated": updated, "data": description}
