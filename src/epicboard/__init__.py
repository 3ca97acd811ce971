"""epicboard - terminal epic and story tracker."""

__version__ = "0.1.0"
__author__ = "epicboard Contributors"

from .config import Config
from .state.models import DBState, Epic, Status, Story
from .state.repository import JiraRepository

__all__ = ["Config", "DBState", "Epic", "JiraRepository", "Status", "Story"]
