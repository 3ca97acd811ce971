"""Console pages, prompts and navigation."""

from .navigator import Navigator
from .pages import EpicDetail, HomePage, Page, StoryDetail
from .prompts import Prompts

__all__ = ["EpicDetail", "HomePage", "Navigator", "Page", "Prompts", "StoryDetail"]
