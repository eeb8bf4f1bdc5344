import logging
from datetime import datetime, timezone
from typing import Any, Callable

from app.repositories.interview_repository import InterviewRepository
from app.schemas.interview import InterviewRecord
from app.services.covers import get_random_interview_cover
from app.services.openai_service import OpenAIService, build_question_prompt
from app.services.question_parser import parse_questions
from app.services.request_normalizer import normalize_request

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class InterviewGenerationService:
    def __init__(
        self,
        repository: InterviewRepository,
        openai_service: OpenAIService,
        cover_picker: Callable[[], str] = get_random_interview_cover,
        clock: Callable[[], str] = utc_now_iso,
    ):
        self.repository = repository
        self.openai_service = openai_service
        self.cover_picker = cover_picker
        self.clock = clock

    def generate(self, body: Any) -> InterviewRecord:
        logger.info("Received interview request: %s", body)
        fields = normalize_request(body)

        raw = self.openai_service.generate_text(build_question_prompt(fields))
        logger.info("Generation output: %s", raw)

        parsed = parse_questions(raw)
        logger.info("Parsed %d questions (%s)", len(parsed.questions), parsed.strategy)

        record = InterviewRecord(
            role=fields.role,
            interview_type=fields.interview_type,
            level=fields.level,
            techstack=fields.techstack,
            amount=fields.amount,
            questions=parsed.questions,
            user_id=fields.user_id,
            user_name=fields.user_name,
            finalized=True,
            cover_image=self.cover_picker(),
            created_at=self.clock(),
        )

        logger.info("Saving interview: %s", record.model_dump(by_alias=True))
        interview = self.repository.create(record)
        logger.info("Interview stored id=%s user_id=%s", interview.id, record.user_id)
        return record
