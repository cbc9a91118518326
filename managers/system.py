from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import NoResultFound
from sqlalchemy.schema import CreateTable
from errors import StoreError, wrapped
from managers.conn import DBConn
from models import CREATE_ORDER, NULL_PERSON_ID
NULL_PERSON_SQL = (
    "INSERT INTO person (person_id, username, first_name, last_name, email, password_hash) "
    "VALUES (:person_id, 'null', 'null', 'null', 'null', 'null')"
)
def create_table_sql(table) -> str:
    return str(CreateTable(table).compile(dialect=postgresql.dialect())).strip()
class SystemModel:
    """Owns the DDL: schema recreation and table existence checks."""
    def __init__(self, db: DBConn):
        self.db = db
    async def recreate_all_tables(self) -> None:
        """Drop the public schema and rebuild every table, then insert the sentinel person.

        Destructive. Meant for provisioning and test setup.
        """
        with wrapped("SystemModel.recreate_all_tables()"):
            await self._drop_all_tables()
            for table in CREATE_ORDER:
                await self.db.execute(create_table_sql(table))
            await self.db.execute(NULL_PERSON_SQL, person_id=NULL_PERSON_ID)
            await self._verify_null_person()
    async def is_table_exist(self, table_name: str) -> bool:
        sql = (
            "SELECT EXISTS ("
            "SELECT FROM pg_tables "
            "WHERE schemaname = 'public' "
            "AND tablename = :table_name) AS is_exist"
        )
        with wrapped("SystemModel.is_table_exist()"):
            row = await self.db.query_row(sql, table_name=table_name)
        return bool(row["is_exist"])
    async def _drop_all_tables(self) -> None:
        with wrapped("SystemModel._drop_all_tables()"):
            await self.db.execute("DROP SCHEMA IF EXISTS public CASCADE")
            await self.db.execute("CREATE SCHEMA public")
    async def _verify_null_person(self) -> None:
        sql = "SELECT person_id FROM person WHERE person_id = :person_id AND username = 'null'"
        try:
            await self.db.query_row(sql, person_id=NULL_PERSON_ID)
        except NoResultFound as exc:
            raise StoreError(
                f"SystemModel._verify_null_person() -> sentinel person {NULL_PERSON_ID} is missing"
            ) from exc
