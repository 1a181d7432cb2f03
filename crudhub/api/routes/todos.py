"""Todo routes"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from ...api.dependencies import get_current_admin, get_current_member, get_page_request, get_unit_of_work
from ...application.dtos.common_dtos import Page, PageRequest
from ...application.dtos.todo_dtos import TodoCreateDto, TodoDto, TodoUpdateDto
from ...application.use_cases.todo_use_cases import (
    CreateTodoUseCase, DeleteTodoUseCase, GetTodoUseCase, ListTodosUseCase, UpdateTodoUseCase
)
from ...domain.enums import SortOrder, TodoSortField
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload

router = APIRouter()


@router.post("/member/todos", response_model=TodoDto, status_code=status.HTTP_201_CREATED)
async def create_todo(
    request: TodoCreateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await CreateTodoUseCase(unit_of_work).execute(member, request)


@router.get("/member/todos", response_model=Page[TodoDto])
async def list_my_todos(
    search: Optional[str] = Query(None, max_length=200),
    completed: Optional[bool] = None,
    sort_by: TodoSortField = TodoSortField.CREATED_AT,
    sort_order: SortOrder = SortOrder.DESC,
    page: PageRequest = Depends(get_page_request),
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """List the caller's todos"""
    return await ListTodosUseCase(unit_of_work).execute(
        page,
        member_id=member.id,
        search=search,
        completed=completed,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/member/todos/{todo_id}", response_model=TodoDto)
async def get_todo(
    todo_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    return await GetTodoUseCase(unit_of_work).execute(member, todo_id)


@router.put("/member/todos/{todo_id}", response_model=TodoDto)
async def update_todo(
    todo_id: UUID,
    request: TodoUpdateDto,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Partially update a todo"""
    return await UpdateTodoUseCase(unit_of_work).execute(member, todo_id, request)


@router.delete("/member/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(
    todo_id: UUID,
    member: ActorPayload = Depends(get_current_member),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteTodoUseCase(unit_of_work).execute(member, todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/admin/todos", response_model=Page[TodoDto])
async def list_all_todos(
    member_id: Optional[UUID] = None,
    search: Optional[str] = Query(None, max_length=200),
    completed: Optional[bool] = None,
    page: PageRequest = Depends(get_page_request),
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """List todos across all members (admin only)"""
    return await ListTodosUseCase(unit_of_work).execute(
        page, member_id=member_id, search=search, completed=completed
    )


@router.delete("/admin/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_todo(
    todo_id: UUID,
    admin: ActorPayload = Depends(get_current_admin),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await DeleteTodoUseCase(unit_of_work).execute(admin, todo_id, as_admin=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
