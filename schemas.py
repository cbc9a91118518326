from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field
UINT32_MAX = 2**32 - 1
ID = Annotated[int, Field(ge=0, le=UINT32_MAX)]
class PersonSummary(BaseModel):
    """Reduced person view embedded in boards and tasks (owner, contributor, author, assignee)."""
    id: ID = 0
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    model_config = ConfigDict(from_attributes=True)
    def to_person(self, password_hash: str = "") -> "Person":
        return Person(
            id=self.id,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            password_hash=password_hash,
        )
BoardOwner = PersonSummary
Contributor = PersonSummary
TaskAuthor = PersonSummary
TaskAssignee = PersonSummary
class Tag(BaseModel):
    id: ID = 0
    name: str
    description: str = ""
    board_id: ID = 0
    model_config = ConfigDict(from_attributes=True)
class Subtask(BaseModel):
    id: ID = 0
    name: str
    parent_task_id: ID = 0
    model_config = ConfigDict(from_attributes=True)
class Task(BaseModel):
    id: ID = 0
    name: str
    description: Optional[str] = None
    board_id: ID = 0
    author: TaskAuthor = Field(default_factory=PersonSummary)
    assignees: list[TaskAssignee] = []
    subtasks: list[Subtask] = []
    tags: list[Tag] = []
    model_config = ConfigDict(from_attributes=True)
class SmallBoard(BaseModel):
    id: ID = 0
    name: str
    owner: BoardOwner = Field(default_factory=PersonSummary)
    model_config = ConfigDict(from_attributes=True)
class Board(BaseModel):
    id: ID = 0
    name: str
    owner: BoardOwner = Field(default_factory=PersonSummary)
    contributors: list[Contributor] = []
    tasks: list[Task] = []
    tags: list[Tag] = []
    model_config = ConfigDict(from_attributes=True)
    def small(self) -> SmallBoard:
        return SmallBoard(id=self.id, name=self.name, owner=self.owner)
class Person(BaseModel):
    id: ID = 0
    username: str
    first_name: str
    last_name: str
    email: str
    password_hash: str
    boards: list[SmallBoard] = []
    assigned_tasks: list[Task] = []
    model_config = ConfigDict(from_attributes=True)
    def summary(self) -> PersonSummary:
        return PersonSummary(
            id=self.id,
            username=self.username,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )
    def is_contributor(self, contrib: Contributor) -> bool:
        """True when contrib describes the same person row as self."""
        return (
            contrib.id == self.id
            and contrib.username == self.username
            and contrib.first_name == self.first_name
            and contrib.last_name == self.last_name
            and contrib.email == self.email
        )
