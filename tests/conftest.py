"""
Pytest configuration and shared fixtures.

Integration fixtures connect to the Postgres at KANBAN_TEST_DATABASE_URL
(an asyncpg URL) and recreate the schema for every test; the tests using them
are skipped when the variable is unset.
"""

import json
import os
from pathlib import Path

import pytest
import pytest_asyncio
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from database import PgConn
from managers import DB, new_db
from schemas import Board, Person, Subtask, Tag, Task

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TEST_DATABASE_URL = os.getenv("KANBAN_TEST_DATABASE_URL")


class MockedData(BaseModel):
    persons: list[Person]
    boards: list[Board]
    tasks: list[Task]
    tags: list[Tag]
    subtasks: list[Subtask]
    task_tag: list[dict[str, int]]
    assignees: list[dict[str, int]]
    contributors: list[dict[str, int]]

    async def create_persons(self, db: DB) -> None:
        for person in self.persons:
            await db.person.create(person)

    async def create_boards(self, db: DB) -> None:
        for board in self.boards:
            await db.board.create(board)

    async def create_tasks(self, db: DB) -> None:
        for task in self.tasks:
            await db.task.create(task)

    async def create_tags(self, db: DB) -> None:
        for tag in self.tags:
            await db.tag.create(tag)

    async def create_all(self, db: DB) -> None:
        """Insert every fixture row; generated ids match the ids in the file."""
        await self.create_persons(db)
        await self.create_boards(db)
        await self.create_tasks(db)
        await self.create_tags(db)
        for subtask in self.subtasks:
            task = Task(id=subtask.parent_task_id, name="")
            await db.task.add_subtask_to_task(subtask, task)
        for link in self.task_tag:
            await db.task.add_tag_to_task(Tag(id=link["ref_tag_id"], name=""), Task(id=link["ref_task_id"], name=""))
        for link in self.assignees:
            assignee = self.person(link["assignee_id"]).summary()
            await db.task.add_assignee_to_task(assignee, Task(id=link["ref_task_id"], name=""))
        for link in self.contributors:
            board = self.board(link["board_id"])
            await db.board.add_contributor_to_board(self.person(link["person_id"]).summary(), board)

    def person(self, person_id: int) -> Person:
        return next(p for p in self.persons if p.id == person_id)

    def board(self, board_id: int) -> Board:
        return next(b for b in self.boards if b.id == board_id)


@pytest.fixture
def mocked_data() -> MockedData:
    data = json.loads((FIXTURES_DIR / "mock_db.json").read_text(encoding="utf-8"))
    return MockedData.model_validate(data)


@pytest_asyncio.fixture
async def db():
    if not TEST_DATABASE_URL:
        pytest.skip("KANBAN_TEST_DATABASE_URL is not set")
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
    try:
        handle = new_db(PgConn(engine))
        await handle.system.recreate_all_tables()
        yield handle
    finally:
        await engine.dispose()
