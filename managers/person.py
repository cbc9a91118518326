from typing import Any
from errors import AggregateLoadError, wrapped
from managers.conn import DBConn, Row
from managers.projections import PERSON_SUMMARY_COLUMNS, small_board_from_row
from managers.task import TaskModel
from schemas import Person
PERSON_COLUMNS = "person_id, username, first_name, last_name, email, password_hash"
def person_from_row(row: Row) -> Person:
    return Person(
        id=row["person_id"],
        username=row["username"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        password_hash=row["password_hash"],
    )
class PersonModel:
    def __init__(self, db: DBConn):
        self.db = db
        self.tasks = TaskModel(db)
    async def create(self, person: Person) -> Person:
        sql = (
            "INSERT INTO person (username, first_name, last_name, email, password_hash) "
            "VALUES (:username, :first_name, :last_name, :email, :password_hash) "
            f"RETURNING {PERSON_COLUMNS}"
        )
        with wrapped("PersonModel.create()"):
            row = await self.db.query_row(
                sql,
                username=person.username,
                first_name=person.first_name,
                last_name=person.last_name,
                email=person.email,
                password_hash=person.password_hash,
            )
        return person_from_row(row)
    async def delete_by_id(self, person_id: int) -> None:
        """Delete the person; owned boards and junction rows go with it."""
        with wrapped("PersonModel.delete_by_id()"):
            await self.db.execute("DELETE FROM person WHERE person_id = :person_id", person_id=person_id)
    async def get_by_id(self, person_id: int) -> Person:
        return await self._get_by("PersonModel.get_by_id()", "person_id", person_id)
    async def get_by_email(self, email: str) -> Person:
        return await self._get_by("PersonModel.get_by_email()", "email", email)
    async def get_by_username(self, username: str) -> Person:
        return await self._get_by("PersonModel.get_by_username()", "username", username)
    async def _get_by(self, operation: str, column: str, value: Any) -> Person:
        # column comes from the fixed set above, never from callers
        sql = f"SELECT {PERSON_COLUMNS} FROM person WHERE {column} = :value"
        with wrapped(operation):
            row = await self.db.query_row(sql, value=value)
            return await self._load_everything(person_from_row(row))
    async def _load_everything(self, person: Person) -> Person:
        with wrapped("PersonModel._load_everything()", AggregateLoadError):
            person = await self._load_assigned_tasks(person)
            person = await self._load_boards(person)
        return person
    async def _load_assigned_tasks(self, person: Person) -> Person:
        sql = "SELECT ref_task_id FROM assignee WHERE assignee_id = :person_id ORDER BY ref_task_id"
        with wrapped("PersonModel._load_assigned_tasks()", AggregateLoadError):
            rows = await self.db.query(sql, person_id=person.id)
            tasks = [await self.tasks.get_by_id(row["ref_task_id"]) for row in rows]
        return person.model_copy(update={"assigned_tasks": tasks})
    async def _load_boards(self, person: Person) -> Person:
        """Boards the person owns plus boards they contribute to."""
        sql = (
            "SELECT board.board_id, board.board_name, board.owner_id, "
            f"{PERSON_SUMMARY_COLUMNS} "
            "FROM board JOIN person ON person.person_id = board.owner_id "
            "WHERE board.owner_id = :person_id "
            "UNION "
            "SELECT board.board_id, board.board_name, board.owner_id, "
            f"{PERSON_SUMMARY_COLUMNS} "
            "FROM contributor "
            "JOIN board ON board.board_id = contributor.board_id "
            "JOIN person ON person.person_id = board.owner_id "
            "WHERE contributor.person_id = :person_id "
            "ORDER BY board_id"
        )
        with wrapped("PersonModel._load_boards()", AggregateLoadError):
            rows = await self.db.query(sql, person_id=person.id)
        return person.model_copy(update={"boards": [small_board_from_row(row) for row in rows]})
