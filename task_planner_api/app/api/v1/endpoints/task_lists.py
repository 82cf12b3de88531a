"""
Task list endpoints for API v1.

CRUD routes for task lists.  Responses carry the nested tasks together
with the derived ``count`` and ``progress`` values.  Deleting a list
also deletes its tasks.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from task_planner_api.app.api.deps import get_task_list_mapper, get_task_list_service
from task_planner_api.app.mappers import TaskListMapper
from task_planner_api.app.schemas.task_list import TaskListCreate, TaskListDto, TaskListUpdate
from task_planner_api.app.services import TaskListService

router = APIRouter()


@router.get("/", response_model=List[TaskListDto])
async def list_task_lists(
    service: TaskListService = Depends(get_task_list_service),
    mapper: TaskListMapper = Depends(get_task_list_mapper),
) -> List[TaskListDto]:
    """Return all task lists."""
    task_lists = await service.list_task_lists()
    return [mapper.to_dto(task_list) for task_list in task_lists]


@router.post("/", response_model=TaskListDto, status_code=status.HTTP_201_CREATED)
async def create_task_list(
    task_list_in: TaskListCreate,
    service: TaskListService = Depends(get_task_list_service),
    mapper: TaskListMapper = Depends(get_task_list_mapper),
) -> TaskListDto:
    task_list = await service.create_task_list(task_list_in.title, task_list_in.description)
    return mapper.to_dto(task_list)


@router.get("/{task_list_id}", response_model=TaskListDto)
async def get_task_list(
    task_list_id: UUID,
    service: TaskListService = Depends(get_task_list_service),
    mapper: TaskListMapper = Depends(get_task_list_mapper),
) -> TaskListDto:
    """Retrieve a single task list.

    A missing list is not an error for the service; the route reports
    it as HTTP 404.
    """
    task_list = await service.get_task_list(task_list_id)
    if task_list is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task list not found")
    return mapper.to_dto(task_list)


@router.put("/{task_list_id}", response_model=TaskListDto)
async def update_task_list(
    task_list_id: UUID,
    task_list_in: TaskListUpdate,
    service: TaskListService = Depends(get_task_list_service),
    mapper: TaskListMapper = Depends(get_task_list_mapper),
) -> TaskListDto:
    task_list = await service.update_task_list(task_list_id, task_list_in.title, task_list_in.description)
    return mapper.to_dto(task_list)


@router.delete("/{task_list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task_list(
    task_list_id: UUID,
    service: TaskListService = Depends(get_task_list_service),
) -> None:
    await service.delete_task_list(task_list_id)
    return None
