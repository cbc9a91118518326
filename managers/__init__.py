from dataclasses import dataclass
from managers.board import BoardModel
from managers.conn import DBConn
from managers.person import PersonModel
from managers.system import SystemModel
from managers.tag import TagModel
from managers.task import TaskModel
@dataclass
class DB:
    """Single handle over the five managers, handed to the HTTP layer."""
    system: SystemModel
    person: PersonModel
    board: BoardModel
    task: TaskModel
    tag: TagModel
def new_db(conn: DBConn) -> DB:
    return DB(
        system=SystemModel(conn),
        person=PersonModel(conn),
        board=BoardModel(conn),
        task=TaskModel(conn),
        tag=TagModel(conn),
    )
__all__ = ["DB", "DBConn", "new_db", "BoardModel", "PersonModel", "SystemModel", "TagModel", "TaskModel"]
