"""Todo use cases"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import or_

from ...core.exceptions import BadRequestError
from ...domain.enums import SortOrder, TodoSortField
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.actor import ActorPayload
from ...infrastructure.orm.todo_model import TodoModel
from ..dtos.common_dtos import Page, PageRequest
from ..dtos.todo_dtos import TodoCreateDto, TodoDto, TodoUpdateDto
from .common import LIKE_ESCAPE, contains_pattern, ensure_owner, get_or_404, paginate


def _get_own_todo(session, actor: ActorPayload, todo_id: UUID) -> TodoModel:
    todo = get_or_404(session, TodoModel, todo_id, "Todo")
    ensure_owner(actor, todo.member_id, "Todo")
    return todo


class CreateTodoUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, request: TodoCreateDto) -> TodoDto:
        async with self.unit_of_work:
            todo = TodoModel(
                member_id=actor.id,
                title=request.title,
                description=request.description,
                due_date=request.due_date,
            )
            self.unit_of_work.session.add(todo)
            await self.unit_of_work.commit()
            return TodoDto.model_validate(todo)


class ListTodosUseCase:
    """Page through todos, either one member's or everyone's"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(
        self,
        page: PageRequest,
        member_id: Optional[UUID] = None,
        search: Optional[str] = None,
        completed: Optional[bool] = None,
        sort_by: TodoSortField = TodoSortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> Page:
        async with self.unit_of_work:
            query = self.unit_of_work.session.query(TodoModel)
            if member_id is not None:
                query = query.filter(TodoModel.member_id == member_id)
            if search:
                pattern = contains_pattern(search)
                query = query.filter(or_(
                    TodoModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    TodoModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                ))
            if completed is not None:
                query = query.filter(TodoModel.is_completed == completed)

            column = getattr(TodoModel, sort_by.value)
            ordering = column.asc() if sort_order is SortOrder.ASC else column.desc()
            query = query.order_by(ordering, TodoModel.id)
            return paginate(query, page, TodoDto.model_validate)


class GetTodoUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, todo_id: UUID) -> TodoDto:
        async with self.unit_of_work:
            return TodoDto.model_validate(_get_own_todo(self.unit_of_work.session, actor, todo_id))


class UpdateTodoUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, todo_id: UUID, request: TodoUpdateDto) -> TodoDto:
        async with self.unit_of_work:
            todo = _get_own_todo(self.unit_of_work.session, actor, todo_id)
            changes = request.model_dump(exclude_unset=True)
            if "title" in changes and changes["title"] is None:
                raise BadRequestError("Title cannot be empty")

            completed = changes.pop("is_completed", None)
            if completed is not None and completed != todo.is_completed:
                todo.is_completed = completed
                todo.completed_at = datetime.utcnow() if completed else None

            for field, value in changes.items():
                setattr(todo, field, value)

            await self.unit_of_work.commit()
            return TodoDto.model_validate(todo)


class DeleteTodoUseCase:
    """Hard delete; admins may remove any member's todo"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, actor: ActorPayload, todo_id: UUID, as_admin: bool = False) -> None:
        async with self.unit_of_work:
            session = self.unit_of_work.session
            if as_admin:
                todo = get_or_404(session, TodoModel, todo_id, "Todo")
            else:
                todo = _get_own_todo(session, actor, todo_id)
            session.delete(todo)
            await self.unit_of_work.commit()
