"""
Top-level router for version 1 of the API.

Both domain routers share the ``/task-lists`` prefix: the tasks router
defines its routes below ``/{task_list_id}/tasks``.
"""

from fastapi import APIRouter

from .endpoints import task_lists, tasks

router = APIRouter()

router.include_router(task_lists.router, prefix="/task-lists", tags=["task-lists"])
router.include_router(tasks.router, prefix="/task-lists", tags=["tasks"])
