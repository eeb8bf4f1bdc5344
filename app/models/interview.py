from sqlalchemy import JSON, Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Interview(Base):
    __tablename__ = "interviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    role: Mapped[str] = mapped_column(Text, nullable=False)
    interview_type: Mapped[str] = mapped_column("type", Text, nullable=False)
    level: Mapped[str] = mapped_column(Text, nullable=False)
    techstack: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    amount: Mapped[str] = mapped_column(Text, nullable=False)
    questions: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    user_name: Mapped[str] = mapped_column(Text, nullable=False)
    finalized: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    cover_image: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[str] = mapped_column(String(40), nullable=False)
