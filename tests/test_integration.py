"""End-to-end tests of the managers against a real Postgres.

Skipped unless KANBAN_TEST_DATABASE_URL is set (see conftest.py).
"""

import pytest

from errors import ConstraintViolationError, InvariantViolationError, NotFoundError
from managers import DB
from models import NULL_PERSON_ID, TABLE_NAMES
from schemas import Board, Person, PersonSummary, Subtask, Tag, Task
from tests.conftest import MockedData

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestSystem:
    async def test_recreate_creates_every_table(self, db: DB) -> None:
        for table in TABLE_NAMES:
            assert await db.system.is_table_exist(table), table

    async def test_unknown_table(self, db: DB) -> None:
        assert not await db.system.is_table_exist("kek")

    async def test_sentinel_person(self, db: DB) -> None:
        sentinel = await db.person.get_by_id(NULL_PERSON_ID)
        assert sentinel.username == "null"
        assert sentinel.boards == []


class TestPerson:
    async def test_create_matches_input(self, db: DB, mocked_data: MockedData) -> None:
        for mocked in mocked_data.persons:
            created = await db.person.create(mocked)
            assert created == mocked

    async def test_unique_username_and_email(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_persons(db)
        first = mocked_data.persons[0]
        with pytest.raises(ConstraintViolationError):
            await db.person.create(first.model_copy(update={"email": "fresh@example.com"}))
        with pytest.raises(ConstraintViolationError):
            await db.person.create(first.model_copy(update={"username": "fresh"}))

    async def test_lookups(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_all(db)
        mocked = mocked_data.person(1)
        by_id = await db.person.get_by_id(1)
        assert by_id == await db.person.get_by_email(mocked.email)
        assert by_id == await db.person.get_by_username(mocked.username)
        assert by_id.summary() == mocked.summary()
        assert [t.id for t in by_id.assigned_tasks] == [3]
        assert by_id.assigned_tasks[0].tags[0].name == "ui"
        # owns boards 1 and 3, contributes to none
        assert [b.id for b in by_id.boards] == [1, 3]

    async def test_contributed_boards_listed(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_all(db)
        person = await db.person.get_by_id(2)
        assert [b.id for b in person.boards] == [1, 2]
        assert person.boards[0].owner.id == 1

    async def test_not_found(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_persons(db)
        with pytest.raises(NotFoundError):
            await db.person.get_by_id(3030)
        with pytest.raises(NotFoundError):
            await db.person.get_by_email("nobody@example.com")

    async def test_delete_cascades(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_all(db)
        await db.person.delete_by_id(1)
        with pytest.raises(NotFoundError):
            await db.person.get_by_id(1)
        for board_id in (1, 3):
            with pytest.raises(NotFoundError):
                await db.board.get_by_id(board_id)
        for task_id in (1, 2, 4):
            with pytest.raises(NotFoundError):
                await db.task.get_by_id(task_id)
        task = await db.task.get_by_id(3)
        assert task.assignees == []

    async def test_deleted_author_falls_back_to_sentinel(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_all(db)
        # person 1 authored nothing on board 2, person 2 authored task 2 on board 1
        await db.person.delete_by_id(2)
        task = await db.task.get_by_id(2)
        assert task.author.id == NULL_PERSON_ID

    async def test_delete_missing(self, db: DB) -> None:
        await db.person.delete_by_id(131)


class TestBoard:
    async def test_create_and_get(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_persons(db)
        owner = mocked_data.person(1).summary()
        created = await db.board.create(Board(name="Backend", owner=owner))
        again = await db.board.create(Board(name="Backend", owner=owner))
        assert created.owner == owner
        assert again.id != created.id
        fetched = await db.board.get_by_id(created.id)
        assert fetched == created

    async def test_unknown_owner(self, db: DB) -> None:
        with pytest.raises(ConstraintViolationError):
            await db.board.create(Board(name="b", owner=PersonSummary(id=3030)))

    async def test_full_aggregate(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_all(db)
        board = await db.board.get_by_id(1)
        assert [t.id for t in board.tags] == [1, 2]
        assert [t.id for t in board.tasks] == [1, 2]
        assert [c.id for c in board.contributors] == [2, 3]
        first = board.tasks[0]
        assert [s.name for s in first.subtasks] == ["person table", "board table"]
        assert [t.id for t in first.tags] == [1, 2]
        assert [a.id for a in first.assignees] == [2]
        assert board.tasks[1].description is None

    async def test_not_found(self, db: DB) -> None:
        with pytest.raises(NotFoundError):
            await db.board.get_by_id(1337)

    async def test_contributor_scenario(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_persons(db)
        p1, p2 = mocked_data.person(1), mocked_data.person(2)
        b1 = await db.board.create(Board(name="B1", owner=p1.summary()))

        b1 = await db.board.add_contributor_to_board(p2.summary(), b1)
        assert len(b1.contributors) == 1
        assert p2.is_contributor(b1.contributors[0])

        with pytest.raises(InvariantViolationError):
            await db.board.add_contributor_to_board(p1.summary(), b1)

        b1 = await db.board.remove_contributor_from_board(p2.summary(), b1)
        assert b1.contributors == []
        assert (await db.board.get_by_id(b1.id)).contributors == []

    async def test_tasks_and_tags(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_persons(db)
        owner = mocked_data.person(1).summary()
        board = await db.board.create(Board(name="B", owner=owner))

        board = await db.board.add_tag_to_board(Tag(name="db", description="Database work"), board)
        board = await db.board.add_task_to_board(Task(name="t1", author=owner), board)
        assert [t.board_id for t in board.tags] == [board.id]
        assert [t.board_id for t in board.tasks] == [board.id]

        with pytest.raises(InvariantViolationError):
            await db.board.remove_task_from_board(board.tasks[0].model_copy(update={"board_id": 999}), board)

        board = await db.board.remove_task_from_board(board.tasks[0], board)
        assert board.tasks == []
        assert len(board.tags) == 1
        board = await db.board.remove_tag_from_board(board.tags[0], board)
        assert board.tags == []

    async def test_delete_cascades(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_all(db)
        await db.board.delete_by_id(1)
        for task_id in (1, 2):
            with pytest.raises(NotFoundError):
                await db.task.get_by_id(task_id)
        for tag_id in (1, 2):
            with pytest.raises(NotFoundError):
                await db.tag.get_by_id(tag_id)
        contributor = await db.person.get_by_id(3)
        assert contributor.boards == []
        assert contributor.assigned_tasks == []

    async def test_delete_missing(self, db: DB) -> None:
        await db.board.delete_by_id(131)


class TestTask:
    async def test_relationships(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_persons(db)
        await mocked_data.create_boards(db)
        await mocked_data.create_tags(db)
        task = await db.task.create(Task(name="t", board_id=1, author=PersonSummary(id=1)))
        assert task.author.username == mocked_data.person(1).username

        task = await db.task.add_assignee_to_task(mocked_data.person(3).summary(), task)
        task = await db.task.add_tag_to_task(mocked_data.tags[0], task)
        task = await db.task.add_subtask_to_task(Subtask(name="step"), task)
        assert [a.id for a in task.assignees] == [3]
        assert [t.id for t in task.tags] == [1]
        assert [s.parent_task_id for s in task.subtasks] == [task.id]
        assert task == await db.task.get_by_id(task.id)

        task = await db.task.remove_assignee_from_task(task.assignees[0], task)
        task = await db.task.remove_tag_from_task(task.tags[0], task)
        task = await db.task.remove_subtask_from_task(task.subtasks[0], task)
        assert task.assignees == [] and task.tags == [] and task.subtasks == []

    async def test_duplicate_assignee(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_all(db)
        task = await db.task.get_by_id(1)
        with pytest.raises(ConstraintViolationError):
            await db.task.add_assignee_to_task(task.assignees[0], task)

    async def test_bad_board(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_persons(db)
        with pytest.raises(ConstraintViolationError):
            await db.task.create(Task(name="t", board_id=1337, author=PersonSummary(id=1)))

    async def test_not_found_and_delete_missing(self, db: DB) -> None:
        with pytest.raises(NotFoundError):
            await db.task.get_by_id(1337)
        await db.task.delete_by_id(131)


class TestTag:
    async def test_create_and_get(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_persons(db)
        await mocked_data.create_boards(db)
        for mocked in mocked_data.tags:
            assert await db.tag.create(mocked) == mocked
            assert await db.tag.get_by_id(mocked.id) == mocked

    async def test_not_found_and_delete_missing(self, db: DB) -> None:
        with pytest.raises(NotFoundError):
            await db.tag.get_by_id(1337)
        await db.tag.delete_by_id(131)

    async def test_delete_detaches_from_tasks(self, db: DB, mocked_data: MockedData) -> None:
        await mocked_data.create_all(db)
        await db.tag.delete_by_id(2)
        task = await db.task.get_by_id(1)
        assert [t.id for t in task.tags] == [1]
