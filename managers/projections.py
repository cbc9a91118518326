from managers.conn import Row
from schemas import PersonSummary, SmallBoard
PERSON_SUMMARY_COLUMNS = "person.username, person.first_name, person.last_name, person.email"
def summary_from_row(row: Row, id_key: str = "person_id") -> PersonSummary:
    return PersonSummary(
        id=row[id_key],
        username=row["username"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
    )
def small_board_from_row(row: Row) -> SmallBoard:
    return SmallBoard(
        id=row["board_id"],
        name=row["board_name"],
        owner=summary_from_row(row, id_key="owner_id"),
    )
