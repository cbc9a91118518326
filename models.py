from sqlalchemy import Column, ForeignKey, Integer, MetaData, String, Table, PrimaryKeyConstraint, text
NULL_PERSON_ID = 0
metadata = MetaData()
person_table = Table(
    'person',
    metadata,
    Column('person_id', Integer, primary_key=True),
    Column('username', String, unique=True, nullable=False),
    Column('first_name', String, nullable=False),
    Column('last_name', String, nullable=False),
    Column('email', String, unique=True, nullable=False),
    Column('password_hash', String, nullable=False),
)
board_table = Table(
    'board',
    metadata,
    Column('board_id', Integer, primary_key=True),
    Column('board_name', String, nullable=False),
    Column('owner_id', Integer, ForeignKey('person.person_id', ondelete='CASCADE'), nullable=False),
)
# author_id falls back to the sentinel person when the author is removed
task_table = Table(
    'task',
    metadata,
    Column('task_id', Integer, primary_key=True),
    Column('task_name', String, nullable=False),
    Column('task_description', String, nullable=True),
    Column('board_id', Integer, ForeignKey('board.board_id', ondelete='CASCADE'), nullable=False),
    Column('author_id', Integer, ForeignKey('person.person_id', ondelete='SET DEFAULT'), nullable=False, server_default=text(str(NULL_PERSON_ID))),
)
assignee_table = Table(
    'assignee',
    metadata,
    Column('ref_task_id', Integer, ForeignKey('task.task_id', ondelete='CASCADE'), nullable=False),
    Column('assignee_id', Integer, ForeignKey('person.person_id', ondelete='CASCADE'), nullable=False),
    PrimaryKeyConstraint('ref_task_id', 'assignee_id', name='assignee_pkey'),
)
subtask_table = Table(
    'subtask',
    metadata,
    Column('subtask_id', Integer, primary_key=True),
    Column('subtask_name', String, nullable=False),
    Column('parent_task_id', Integer, ForeignKey('task.task_id', ondelete='CASCADE'), nullable=False),
)
tag_table = Table(
    'tag',
    metadata,
    Column('tag_id', Integer, primary_key=True),
    Column('tag_name', String, nullable=False),
    Column('tag_description', String, nullable=False),
    Column('board_id', Integer, ForeignKey('board.board_id', ondelete='CASCADE'), nullable=False),
)
task_tag_table = Table(
    'task_tag',
    metadata,
    Column('ref_task_id', Integer, ForeignKey('task.task_id', ondelete='CASCADE'), nullable=False),
    Column('ref_tag_id', Integer, ForeignKey('tag.tag_id', ondelete='CASCADE'), nullable=False),
    PrimaryKeyConstraint('ref_task_id', 'ref_tag_id', name='task_tag_pkey'),
)
contributor_table = Table(
    'contributor',
    metadata,
    Column('person_id', Integer, ForeignKey('person.person_id', ondelete='CASCADE'), nullable=False),
    Column('board_id', Integer, ForeignKey('board.board_id', ondelete='CASCADE'), nullable=False),
    PrimaryKeyConstraint('person_id', 'board_id', name='contributor_pkey'),
)
# creation order; every table only references tables listed before it
CREATE_ORDER = (
    person_table,
    board_table,
    task_table,
    assignee_table,
    subtask_table,
    tag_table,
    task_tag_table,
    contributor_table,
)
TABLE_NAMES = tuple(table.name for table in CREATE_ORDER)
