import logging

from openai import OpenAI

from app.core.config import settings
from app.schemas.interview import InterviewFields

logger = logging.getLogger(__name__)


def build_question_prompt(fields: InterviewFields) -> str:
    return (
        "Prepare questions for a job interview.\n"
        f"The job role is {fields.role}.\n"
        f"The job experience level is {fields.level}.\n"
        f"The tech stack used in the job is: {', '.join(fields.techstack)}.\n"
        f"The focus between behavioural and technical questions should lean towards: {fields.interview_type}.\n"
        f"The amount of questions required is: {fields.amount}.\n"
        "Please return only the questions, without any additional text.\n"
        "The questions are going to be read by a voice assistant so do not use \"/\" or \"*\" "
        "or any other special characters which might break the voice assistant.\n"
        "Return the questions formatted like this:\n"
        "[\"Question 1\", \"Question 2\", \"Question 3\"]"
    )


class OpenAIService:
    def __init__(self, api_key: str | None = None, model: str | None = None, base_url: str | None = None):
        self.api_key = api_key or settings.openai_api_key
        self.model = model or settings.openai_model
        self.base_url = base_url or settings.openai_base_url
        self._client: OpenAI | None = None

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise RuntimeError("OPENAI_API_KEY is not configured. Set it in deployment environment variables.")
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    def generate_text(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            temperature=settings.openai_temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        text = response.choices[0].message.content or ""
        logger.debug("Generation finished model=%s chars=%d", self.model, len(text))
        return text


def get_openai_service() -> OpenAIService:
    return OpenAIService()
