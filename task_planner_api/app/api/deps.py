"""
FastAPI dependencies wiring handlers to services and mappers.

The gateway is stored on ``app.state`` by ``create_app`` so that tests
can build an application against a temporary database.
"""

from fastapi import Depends, Request

from ..mappers import DefaultTaskListMapper, DefaultTaskMapper, TaskListMapper, TaskMapper
from ..repositories.base import Gateway
from ..services import TaskListService, TaskService


def get_gateway(request: Request) -> Gateway:
    return request.app.state.gateway


def get_task_list_service(gateway: Gateway = Depends(get_gateway)) -> TaskListService:
    return TaskListService(gateway)


def get_task_service(gateway: Gateway = Depends(get_gateway)) -> TaskService:
    return TaskService(gateway)


def get_task_list_mapper() -> TaskListMapper:
    return DefaultTaskListMapper()


def get_task_mapper() -> TaskMapper:
    return DefaultTaskMapper()
