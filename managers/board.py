from errors import AggregateLoadError, InvariantViolationError, wrapped
from managers.conn import DBConn, Row
from managers.projections import PERSON_SUMMARY_COLUMNS, summary_from_row
from managers.tag import TAG_COLUMNS, TagModel, tag_from_row
from managers.task import TaskModel
from schemas import Board, Contributor, Tag, Task
def board_from_row(row: Row) -> Board:
    return Board(
        id=row["board_id"],
        name=row["board_name"],
        owner=summary_from_row(row, id_key="owner_id"),
    )
class BoardModel:
    """Board rows plus their tags, tasks and contributors.

    Add operations reload only the collection they touched and leave the others
    as passed in; remove operations re-fetch the whole board.
    """
    def __init__(self, db: DBConn):
        self.db = db
        self.tasks = TaskModel(db)
        self.tags = TagModel(db)
    async def create(self, board: Board) -> Board:
        sql = (
            "WITH inserted_board AS ("
            "INSERT INTO board (board_name, owner_id) "
            "VALUES (:name, :owner_id) "
            "RETURNING board_id, board_name, owner_id) "
            f"SELECT inserted_board.*, {PERSON_SUMMARY_COLUMNS} "
            "FROM inserted_board JOIN person ON person.person_id = inserted_board.owner_id"
        )
        with wrapped("BoardModel.create()"):
            row = await self.db.query_row(sql, name=board.name, owner_id=board.owner.id)
        return board_from_row(row)
    async def delete_by_id(self, board_id: int) -> None:
        with wrapped("BoardModel.delete_by_id()"):
            await self.db.execute("DELETE FROM board WHERE board_id = :board_id", board_id=board_id)
    async def get_by_id(self, board_id: int) -> Board:
        sql = (
            "SELECT board.board_id, board.board_name, board.owner_id, "
            f"{PERSON_SUMMARY_COLUMNS} "
            "FROM board JOIN person ON person.person_id = board.owner_id "
            "WHERE board.board_id = :board_id"
        )
        with wrapped("BoardModel.get_by_id()"):
            row = await self.db.query_row(sql, board_id=board_id)
            return await self._load_everything(board_from_row(row))
    async def add_contributor_to_board(self, contrib: Contributor, board: Board) -> Board:
        if contrib.id == board.owner.id:
            raise InvariantViolationError(
                f"BoardModel.add_contributor_to_board() -> person {contrib.id} "
                f"owns board {board.id} and cannot also be a contributor"
            )
        sql = "INSERT INTO contributor (person_id, board_id) VALUES (:person_id, :board_id)"
        with wrapped("BoardModel.add_contributor_to_board()"):
            await self.db.execute(sql, person_id=contrib.id, board_id=board.id)
            return await self._load_contributors(board)
    async def remove_contributor_from_board(self, contrib: Contributor, board: Board) -> Board:
        sql = "DELETE FROM contributor WHERE person_id = :person_id AND board_id = :board_id"
        with wrapped("BoardModel.remove_contributor_from_board()"):
            await self.db.execute(sql, person_id=contrib.id, board_id=board.id)
            return await self.get_by_id(board.id)
    async def add_task_to_board(self, task: Task, board: Board) -> Board:
        with wrapped("BoardModel.add_task_to_board()"):
            await self.tasks.create(task.model_copy(update={"board_id": board.id}))
            return await self._load_tasks(board)
    async def remove_task_from_board(self, task: Task, board: Board) -> Board:
        if task.board_id != board.id:
            raise InvariantViolationError(
                f"BoardModel.remove_task_from_board() -> task.board_id({task.board_id}) != board.id({board.id})"
            )
        with wrapped("BoardModel.remove_task_from_board()"):
            await self.tasks.delete_by_id(task.id)
            return await self.get_by_id(board.id)
    async def add_tag_to_board(self, tag: Tag, board: Board) -> Board:
        with wrapped("BoardModel.add_tag_to_board()"):
            await self.tags.create(tag.model_copy(update={"board_id": board.id}))
            return await self._load_tags(board)
    async def remove_tag_from_board(self, tag: Tag, board: Board) -> Board:
        if tag.board_id != board.id:
            raise InvariantViolationError(
                f"BoardModel.remove_tag_from_board() -> tag.board_id({tag.board_id}) != board.id({board.id})"
            )
        with wrapped("BoardModel.remove_tag_from_board()"):
            await self.tags.delete_by_id(tag.id)
            return await self.get_by_id(board.id)
    async def _load_everything(self, board: Board) -> Board:
        with wrapped("BoardModel._load_everything()", AggregateLoadError):
            board = await self._load_tags(board)
            board = await self._load_tasks(board)
            board = await self._load_contributors(board)
        return board
    async def _load_tags(self, board: Board) -> Board:
        sql = f"SELECT {TAG_COLUMNS} FROM tag WHERE tag.board_id = :board_id ORDER BY tag.tag_id"
        with wrapped("BoardModel._load_tags()", AggregateLoadError):
            rows = await self.db.query(sql, board_id=board.id)
        return board.model_copy(update={"tags": [tag_from_row(row) for row in rows]})
    async def _load_tasks(self, board: Board) -> Board:
        sql = "SELECT task_id FROM task WHERE board_id = :board_id ORDER BY task_id"
        with wrapped("BoardModel._load_tasks()", AggregateLoadError):
            rows = await self.db.query(sql, board_id=board.id)
            # every task is hydrated through its own aggregate load
            tasks = [await self.tasks.get_by_id(row["task_id"]) for row in rows]
        return board.model_copy(update={"tasks": tasks})
    async def _load_contributors(self, board: Board) -> Board:
        sql = (
            f"SELECT contributor.person_id, {PERSON_SUMMARY_COLUMNS} "
            "FROM contributor JOIN person ON person.person_id = contributor.person_id "
            "WHERE contributor.board_id = :board_id "
            "ORDER BY contributor.person_id"
        )
        with wrapped("BoardModel._load_contributors()", AggregateLoadError):
            rows = await self.db.query(sql, board_id=board.id)
        contributors = [summary_from_row(row) for row in rows]
        return board.model_copy(update={"contributors": contributors})
