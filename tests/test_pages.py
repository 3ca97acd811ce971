import pytest

from epicboard.errors import IntegrityError, NotFoundError
from epicboard.state.database import InMemoryDatabase
from epicboard.state.models import DBState, Epic
from epicboard.state.repository import JiraRepository
from epicboard.ui.actions import (
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    UpdateEpicStatus,
    UpdateStoryStatus,
)
from epicboard.ui.pages import EpicDetail, HomePage, StoryDetail


def test_home_page_draw_lists_epics(repo: JiraRepository, capsys) -> None:
    epic_id = repo.create_epic("Build login", "")

    HomePage(repo).draw_page()

    out = capsys.readouterr().out
    assert "EPICS" in out
    assert epic_id in out
    assert "Build login" in out
    assert "OPEN" in out
    assert "[q] quit" in out


def test_home_page_handle_input_should_return_the_correct_actions(repo: JiraRepository) -> None:
    epic_id = repo.create_epic("", "")
    story_id = repo.create_story("", "", epic_id)
    page = HomePage(repo)

    assert page.handle_input("") is None
    assert page.handle_input("q") == Exit()
    assert page.handle_input("c") == CreateEpic()
    assert page.handle_input(epic_id) == NavigateToEpicDetail(epic_id=epic_id)
    assert page.handle_input(story_id) is None
    assert page.handle_input("j983f2j") is None
    assert page.handle_input("Q") is None


def test_epic_detail_draw_should_error_for_invalid_epic_id(repo: JiraRepository) -> None:
    with pytest.raises(NotFoundError):
        EpicDetail("missing", repo).draw_page()


def test_epic_detail_draw_shows_epic_and_its_stories(repo: JiraRepository, capsys) -> None:
    epic_id = repo.create_epic("Payments", "card support")
    story_id = repo.create_story("Refunds", "", epic_id)
    other_epic = repo.create_epic("Other", "")
    repo.create_story("Unrelated", "", other_epic)

    EpicDetail(epic_id, repo).draw_page()

    out = capsys.readouterr().out
    assert "Payments" in out
    assert "card support" in out
    assert story_id in out
    assert "Refunds" in out
    assert "Unrelated" not in out


def test_epic_detail_handle_input_should_return_the_correct_actions(repo: JiraRepository) -> None:
    epic_id = repo.create_epic("", "")
    story_id = repo.create_story("", "", epic_id)
    other_epic = repo.create_epic("", "")
    other_story = repo.create_story("", "", other_epic)
    page = EpicDetail(epic_id, repo)

    assert page.handle_input("p") == NavigateToPreviousPage()
    assert page.handle_input("u") == UpdateEpicStatus(epic_id=epic_id)
    assert page.handle_input("d") == DeleteEpic(epic_id=epic_id)
    assert page.handle_input("c") == CreateStory(epic_id=epic_id)
    assert page.handle_input(story_id) == NavigateToStoryDetail(epic_id=epic_id, story_id=story_id)
    assert page.handle_input(other_story) is None
    assert page.handle_input("j983f2j") is None
    assert page.handle_input("") is None


def test_epic_detail_fixed_keys_still_work_once_epic_is_deleted(repo: JiraRepository) -> None:
    epic_id = repo.create_epic("", "")
    page = EpicDetail(epic_id, repo)
    repo.delete_epic(epic_id)

    assert page.handle_input("p") == NavigateToPreviousPage()
    assert page.handle_input("d") == DeleteEpic(epic_id=epic_id)
    with pytest.raises(NotFoundError):
        page.handle_input("some-story")


def test_epic_detail_draw_reports_dangling_story_reference() -> None:
    state = DBState(epics={"e1": Epic(name="E", description="", stories=["gone"])})
    page = EpicDetail("e1", JiraRepository(InMemoryDatabase(state)))

    with pytest.raises(IntegrityError):
        page.draw_page()


def test_story_detail_draw_should_error_for_invalid_story_id(repo: JiraRepository) -> None:
    epic_id = repo.create_epic("", "")

    with pytest.raises(NotFoundError):
        StoryDetail(epic_id, "missing", repo).draw_page()


def test_story_detail_draw_shows_story(repo: JiraRepository, capsys) -> None:
    epic_id = repo.create_epic("", "")
    story_id = repo.create_story("Refunds", "partial refunds", epic_id)

    StoryDetail(epic_id, story_id, repo).draw_page()

    out = capsys.readouterr().out
    assert "STORY" in out
    assert "Refunds" in out
    assert "partial refunds" in out
    assert "[d] delete story" in out


def test_story_detail_handle_input_should_return_the_correct_actions(repo: JiraRepository) -> None:
    epic_id = repo.create_epic("", "")
    story_id = repo.create_story("", "", epic_id)
    page = StoryDetail(epic_id, story_id, repo)

    assert page.handle_input("p") == NavigateToPreviousPage()
    assert page.handle_input("u") == UpdateStoryStatus(story_id=story_id)
    assert page.handle_input("d") == DeleteStory(epic_id=epic_id, story_id=story_id)
    assert page.handle_input("c") is None
    assert page.handle_input(story_id) is None
    assert page.handle_input("") is None


def test_pages_do_not_write(repo: JiraRepository, mock_db) -> None:
    epic_id = repo.create_epic("", "")
    story_id = repo.create_story("", "", epic_id)
    before = mock_db.read_db()

    for page in (HomePage(repo), EpicDetail(epic_id, repo), StoryDetail(epic_id, story_id, repo)):
        page.draw_page()
        for key in ("q", "c", "u", "d", "p", epic_id, story_id):
            page.handle_input(key)

    assert mock_db.read_db() == before
