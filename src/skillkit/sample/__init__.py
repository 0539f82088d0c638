"""Sample to-do list skill built on skillkit."""

from .app import build_skill
from .repository import ItemNotFoundError, TodoRepository
from .service import TodoService

__all__ = ["build_skill", "TodoRepository", "TodoService", "ItemNotFoundError"]
