"""Todo service."""

from typing import Any

from sqlalchemy.orm import Query

from achievify.models.todo import Todo
from achievify.schemas.todo import TodoUpdate
from achievify.services.owned import OwnedResourceService, require


class TodoService(OwnedResourceService[Todo]):
    """Todos owned by a single user."""

    model = Todo
    not_found_message = "Todo not found"

    def apply_filters(self, query: Query, done: str | None = None, **_: Any) -> Query:
        if done in ("0", "1"):
            query = query.filter(Todo.done.is_(done == "1"))
        return query

    def list_todos(self, user_id: int | None, done: str | None = None) -> list[Todo]:
        require("userId is required", user_id)
        return self.list_owned(user_id, done=done)

    def create_todo(self, user_id: int | None, title: str | None) -> Todo:
        require("userId and title are required", user_id, title)
        return self.create(user_id, title=title.strip())

    def update_todo(self, todo_id: int, patch: TodoUpdate) -> Todo:
        require("id and userId required", todo_id, patch.user_id)

        # Only fields that are present and usable make it into the write.
        changes: dict[str, Any] = {}
        if patch.title is not None and patch.title.strip():
            changes["title"] = patch.title.strip()
        if patch.done is not None:
            changes["done"] = patch.done

        return self.update(todo_id, patch.user_id, changes)

    def delete_todo(self, todo_id: int, user_id: int | None) -> None:
        require("id and userId required", todo_id, user_id)
        self.delete(todo_id, user_id)
