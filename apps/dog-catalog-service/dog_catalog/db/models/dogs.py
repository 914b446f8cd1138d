from sqlalchemy import Boolean, Column, DateTime, Index, Integer, Text, func, false
from .base import Base, now_utc


class Dog(Base):
    __tablename__ = 'dogs'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    breed = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    logo_url = Column(Text, nullable=True)
    photo_url = Column(Text, nullable=True)
    age = Column(Integer, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False, server_default=false())
    # Set once at insertion; nothing updates it afterwards
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, server_default=func.now())

    __table_args__ = (
        Index('idx_dogs_breed', 'breed'),
        Index('idx_dogs_featured_created', 'is_featured', 'created_at'),
        # Never reuse ids of deleted rows on SQLite
        {'sqlite_autoincrement': True},
    )

    def __repr__(self) -> str:
        return f"<Dog id={self.id} name={self.name!r} breed={self.breed!r}>"
