"""Todo ORM Model"""

from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, Uuid

from ...db.models import Base, UuidPrimaryKeyMixin, TimestampMixin


class TodoModel(UuidPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'todos'

    member_id = Column(Uuid, ForeignKey('members.id'), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    is_completed = Column(Boolean, default=False, nullable=False)
    due_date = Column(DateTime, nullable=True)
    completed_at = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<Todo(id={self.id}, member_id={self.member_id}, title='{self.title}')>"
