"""State management modules."""

from .database import Database, InMemoryDatabase, JSONFileDatabase
from .ids import generate_id
from .models import DBState, Epic, Status, Story
from .persistence import Persistence
from .repository import JiraRepository

__all__ = [
    "Database",
    "DBState",
    "Epic",
    "InMemoryDatabase",
    "JiraRepository",
    "JSONFileDatabase",
    "Persistence",
    "Status",
    "Story",
    "generate_id",
]
