from sqlalchemy.orm import Session

from app.models.interview import Interview
from app.schemas.interview import InterviewRecord


class InterviewRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, record: InterviewRecord) -> Interview:
        interview = Interview(
            role=record.role,
            interview_type=record.interview_type,
            level=record.level,
            techstack=list(record.techstack),
            amount=record.amount,
            questions=list(record.questions),
            user_id=record.user_id,
            user_name=record.user_name,
            finalized=record.finalized,
            cover_image=record.cover_image,
            created_at=record.created_at,
        )
        self.db.add(interview)
        self.db.commit()
        self.db.refresh(interview)
        return interview
