from __future__ import annotations
from datetime import datetime

from sqlalchemy.orm import Session

from jobhunt.models.user import User


def upsert_user(
    db: Session,
    user_id: int,
    username: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
) -> User:
    row = db.get(User, user_id)
    now = datetime.utcnow()
    if row:
        row.username = username
        row.first_name = first_name
        row.last_name = last_name
        row.updated_at = now
    else:
        row = User(
            id=user_id,
            username=username,
            first_name=first_name,
            last_name=last_name,
            created_at=now,
            updated_at=now,
        )
        db.add(row)
    db.commit()
    db.refresh(row)
    return row


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at.desc()).all()
