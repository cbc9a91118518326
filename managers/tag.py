from errors import wrapped
from managers.conn import DBConn, Row
from schemas import Tag
TAG_COLUMNS = "tag.tag_id, tag.tag_name, tag.tag_description, tag.board_id"
def tag_from_row(row: Row) -> Tag:
    return Tag(
        id=row["tag_id"],
        name=row["tag_name"],
        description=row["tag_description"],
        board_id=row["board_id"],
    )
class TagModel:
    def __init__(self, db: DBConn):
        self.db = db
    async def create(self, tag: Tag) -> Tag:
        """Insert a tag row.

        Upper layers should go through BoardModel.add_tag_to_board, which scopes
        the tag to its board.
        """
        sql = (
            "INSERT INTO tag (tag_name, tag_description, board_id) "
            "VALUES (:name, :description, :board_id) "
            f"RETURNING {TAG_COLUMNS}"
        )
        with wrapped("TagModel.create()"):
            row = await self.db.query_row(
                sql, name=tag.name, description=tag.description, board_id=tag.board_id
            )
        return tag_from_row(row)
    async def delete_by_id(self, tag_id: int) -> None:
        with wrapped("TagModel.delete_by_id()"):
            await self.db.execute("DELETE FROM tag WHERE tag_id = :tag_id", tag_id=tag_id)
    async def get_by_id(self, tag_id: int) -> Tag:
        sql = f"SELECT {TAG_COLUMNS} FROM tag WHERE tag_id = :tag_id"
        with wrapped("TagModel.get_by_id()"):
            row = await self.db.query_row(sql, tag_id=tag_id)
        return tag_from_row(row)
