from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.db_setting import Base


class DeskModel(Base):
    __tablename__ = 'desk'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self):
        return f'<DeskModel(id={self.id}, description={self.description})>'
