from __future__ import annotations
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session


def insert_ignore(db: Session, model, values: dict, conflict_columns: list[str]) -> bool:
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        stmt = postgresql.insert(model).values(**values)
    elif dialect == "sqlite":
        stmt = sqlite.insert(model).values(**values)
    else:
        raise ValueError(f"unsupported database dialect={dialect}")
    stmt = stmt.on_conflict_do_nothing(index_elements=conflict_columns)
    result = db.execute(stmt)
    return result.rowcount == 1
