"""User ORM — the single persisted entity.

Invariants:
    - id is an autoincrement INTEGER primary key, assigned by the database
    - email is unique and non-nullable; name is non-nullable
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_api.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"
