"""
Task endpoints for API v1.

Tasks are nested under their list: ``/task-lists/{task_list_id}/tasks``.
Request bodies are ``TaskDto`` records converted to drafts by the
mapper; the service decides which of their fields are accepted.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from task_planner_api.app.api.deps import get_task_mapper, get_task_service
from task_planner_api.app.mappers import TaskMapper
from task_planner_api.app.schemas.task import TaskDto
from task_planner_api.app.services import TaskService

router = APIRouter()


@router.get("/{task_list_id}/tasks", response_model=List[TaskDto])
async def list_tasks(
    task_list_id: UUID,
    service: TaskService = Depends(get_task_service),
    mapper: TaskMapper = Depends(get_task_mapper),
) -> List[TaskDto]:
    """Return the tasks of a list (an empty list for an unknown list id)."""
    tasks = await service.list_tasks(task_list_id)
    return [mapper.to_dto(task) for task in tasks]


@router.post("/{task_list_id}/tasks", response_model=TaskDto, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_list_id: UUID,
    task_in: TaskDto,
    service: TaskService = Depends(get_task_service),
    mapper: TaskMapper = Depends(get_task_mapper),
) -> TaskDto:
    task = await service.create_task(task_list_id, mapper.from_dto(task_in))
    return mapper.to_dto(task)


@router.get("/{task_list_id}/tasks/{task_id}", response_model=TaskDto)
async def get_task(
    task_list_id: UUID,
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
    mapper: TaskMapper = Depends(get_task_mapper),
) -> TaskDto:
    task = await service.get_task(task_list_id, task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return mapper.to_dto(task)


@router.put("/{task_list_id}/tasks/{task_id}", response_model=TaskDto)
async def update_task(
    task_list_id: UUID,
    task_id: UUID,
    task_in: TaskDto,
    service: TaskService = Depends(get_task_service),
    mapper: TaskMapper = Depends(get_task_mapper),
) -> TaskDto:
    """Update a task; omitted priority and status keep their stored values."""
    task = await service.update_task(task_list_id, task_id, mapper.from_dto(task_in))
    return mapper.to_dto(task)


@router.delete("/{task_list_id}/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_list_id: UUID,
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
) -> None:
    await service.delete_task(task_list_id, task_id)
    return None
