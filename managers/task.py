from errors import AggregateLoadError, wrapped
from managers.conn import DBConn, Row
from managers.projections import PERSON_SUMMARY_COLUMNS, summary_from_row
from managers.tag import TAG_COLUMNS, tag_from_row
from schemas import Subtask, Tag, Task, TaskAssignee
TASK_COLUMNS = "task_id, task_name, task_description, board_id, author_id"
def task_from_row(row: Row) -> Task:
    return Task(
        id=row["task_id"],
        name=row["task_name"],
        description=row["task_description"],
        board_id=row["board_id"],
        author=summary_from_row(row, id_key="author_id"),
    )
class TaskModel:
    def __init__(self, db: DBConn):
        self.db = db
    async def create(self, task: Task) -> Task:
        """Insert a task and return it with its author projection.

        Upper layers should go through BoardModel.add_task_to_board.
        """
        sql = (
            "WITH inserted_task AS ("
            "INSERT INTO task (task_name, task_description, board_id, author_id) "
            "VALUES (:name, :description, :board_id, :author_id) "
            f"RETURNING {TASK_COLUMNS}) "
            f"SELECT inserted_task.*, {PERSON_SUMMARY_COLUMNS} "
            "FROM inserted_task JOIN person ON person.person_id = inserted_task.author_id"
        )
        with wrapped("TaskModel.create()"):
            row = await self.db.query_row(
                sql,
                name=task.name,
                description=task.description,
                board_id=task.board_id,
                author_id=task.author.id,
            )
        return task_from_row(row)
    async def delete_by_id(self, task_id: int) -> None:
        with wrapped("TaskModel.delete_by_id()"):
            await self.db.execute("DELETE FROM task WHERE task_id = :task_id", task_id=task_id)
    async def get_by_id(self, task_id: int) -> Task:
        sql = (
            "SELECT task.task_id, task.task_name, task.task_description, task.board_id, task.author_id, "
            f"{PERSON_SUMMARY_COLUMNS} "
            "FROM task JOIN person ON person.person_id = task.author_id "
            "WHERE task.task_id = :task_id"
        )
        with wrapped("TaskModel.get_by_id()"):
            row = await self.db.query_row(sql, task_id=task_id)
            return await self._load_everything(task_from_row(row))
    async def add_assignee_to_task(self, assignee: TaskAssignee, task: Task) -> Task:
        """Assign a person to the task; only the assignees are reloaded."""
        sql = "INSERT INTO assignee (ref_task_id, assignee_id) VALUES (:task_id, :assignee_id)"
        with wrapped("TaskModel.add_assignee_to_task()"):
            await self.db.execute(sql, task_id=task.id, assignee_id=assignee.id)
            return await self._load_assignees(task)
    async def remove_assignee_from_task(self, assignee: TaskAssignee, task: Task) -> Task:
        sql = "DELETE FROM assignee WHERE ref_task_id = :task_id AND assignee_id = :assignee_id"
        with wrapped("TaskModel.remove_assignee_from_task()"):
            await self.db.execute(sql, task_id=task.id, assignee_id=assignee.id)
            return await self.get_by_id(task.id)
    async def add_tag_to_task(self, tag: Tag, task: Task) -> Task:
        """Attach a tag to the task; only the tags are reloaded."""
        sql = "INSERT INTO task_tag (ref_task_id, ref_tag_id) VALUES (:task_id, :tag_id)"
        with wrapped("TaskModel.add_tag_to_task()"):
            await self.db.execute(sql, task_id=task.id, tag_id=tag.id)
            return await self._load_tags(task)
    async def remove_tag_from_task(self, tag: Tag, task: Task) -> Task:
        sql = "DELETE FROM task_tag WHERE ref_task_id = :task_id AND ref_tag_id = :tag_id"
        with wrapped("TaskModel.remove_tag_from_task()"):
            await self.db.execute(sql, task_id=task.id, tag_id=tag.id)
            return await self.get_by_id(task.id)
    async def add_subtask_to_task(self, subtask: Subtask, task: Task) -> Task:
        """Create a subtask under task; only the subtasks are reloaded."""
        sql = "INSERT INTO subtask (subtask_name, parent_task_id) VALUES (:name, :task_id)"
        with wrapped("TaskModel.add_subtask_to_task()"):
            await self.db.execute(sql, name=subtask.name, task_id=task.id)
            return await self._load_subtasks(task)
    async def remove_subtask_from_task(self, subtask: Subtask, task: Task) -> Task:
        with wrapped("TaskModel.remove_subtask_from_task()"):
            await self.db.execute(
                "DELETE FROM subtask WHERE subtask_id = :subtask_id", subtask_id=subtask.id
            )
            return await self.get_by_id(task.id)
    async def _load_everything(self, task: Task) -> Task:
        with wrapped("TaskModel._load_everything()", AggregateLoadError):
            task = await self._load_tags(task)
            task = await self._load_subtasks(task)
            task = await self._load_assignees(task)
        return task
    async def _load_tags(self, task: Task) -> Task:
        sql = (
            f"SELECT {TAG_COLUMNS} "
            "FROM task_tag JOIN tag ON tag.tag_id = task_tag.ref_tag_id "
            "WHERE task_tag.ref_task_id = :task_id "
            "ORDER BY tag.tag_id"
        )
        with wrapped("TaskModel._load_tags()", AggregateLoadError):
            rows = await self.db.query(sql, task_id=task.id)
        return task.model_copy(update={"tags": [tag_from_row(row) for row in rows]})
    async def _load_subtasks(self, task: Task) -> Task:
        sql = (
            "SELECT subtask_id, subtask_name, parent_task_id "
            "FROM subtask WHERE parent_task_id = :task_id "
            "ORDER BY subtask_id"
        )
        with wrapped("TaskModel._load_subtasks()", AggregateLoadError):
            rows = await self.db.query(sql, task_id=task.id)
        subtasks = [
            Subtask(id=row["subtask_id"], name=row["subtask_name"], parent_task_id=row["parent_task_id"])
            for row in rows
        ]
        return task.model_copy(update={"subtasks": subtasks})
    async def _load_assignees(self, task: Task) -> Task:
        sql = (
            f"SELECT assignee.assignee_id, {PERSON_SUMMARY_COLUMNS} "
            "FROM assignee JOIN person ON person.person_id = assignee.assignee_id "
            "WHERE assignee.ref_task_id = :task_id "
            "ORDER BY assignee.assignee_id"
        )
        with wrapped("TaskModel._load_assignees()", AggregateLoadError):
            rows = await self.db.query(sql, task_id=task.id)
        assignees = [summary_from_row(row, id_key="assignee_id") for row in rows]
        return task.model_copy(update={"assignees": assignees})
