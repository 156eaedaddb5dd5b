from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from user.models import User
from user.schemas import UserCreate, UserUpdate


def get_users(db: Session) -> List[User]:
    return list(db.scalars(select(User).order_by(User.id)))


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.scalars(select(User).where(User.username == username)).first()


def create_user(db: Session, user: UserCreate) -> User:
    db_user = User(username=user.username, password=user.password)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(db: Session, user_id: int, patch: UserUpdate) -> Optional[User]:
    db_user = db.get(User, user_id)
    if not db_user:
        return None
    for k, v in patch.changes().items():
        setattr(db_user, k, v)
    db.commit()
    db.refresh(db_user)
    return db_user


def delete_user(db: Session, user_id: int) -> bool:
    db_user = db.get(User, user_id)
    if not db_user:
        return False
    db.delete(db_user)
    db.commit()
    return True
