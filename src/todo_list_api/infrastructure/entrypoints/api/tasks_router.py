from collections.abc import AsyncIterator
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from todo_list_api.core.application.tasks import TaskService
from todo_list_api.core.application.tasks.contracts import (
    CreateTaskDTO,
    TaskViewDTO,
    UpdateTaskStatusDTO,
)
from todo_list_api.infrastructure.config.resolution.container import (
    build_task_service,
    build_unit_of_work,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


async def get_task_service(request: Request) -> AsyncIterator[TaskService]:
    """Open a unit of work for the duration of the request."""
    async with build_unit_of_work(request.app.state.database) as uow:
        yield build_task_service(uow)


@router.post("", status_code=status.HTTP_200_OK, response_model=UUID)
async def create_task(dto: CreateTaskDTO, service: TaskService = Depends(get_task_service)) -> UUID:
    return await service.create(dto)


@router.get("", response_model=list[TaskViewDTO])
async def list_tasks(service: TaskService = Depends(get_task_service)) -> list[TaskViewDTO]:
    return await service.list_tasks()


@router.patch("/{task_id}", status_code=status.HTTP_200_OK)
async def update_task_status(
    task_id: UUID,
    dto: UpdateTaskStatusDTO,
    service: TaskService = Depends(get_task_service),
) -> Response:
    await service.update_status(task_id, dto)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: UUID, service: TaskService = Depends(get_task_service)) -> Response:
    await service.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
