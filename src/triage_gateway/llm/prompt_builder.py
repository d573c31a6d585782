"""
Prompt builder for provider requests.

Responsible for:
- Loading and rendering Jinja2 templates (system + per-operation user prompts)
- Reducing the body to its first line for classification
- Truncating the body for summarization
"""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, TemplateNotFound
import structlog

from triage_gateway.llm.exceptions import GatewayConfigurationError
from triage_gateway.llm.text_utils import first_line, truncate_with_marker
from triage_gateway.models.enums import IntentEnum, LabelEnum, PriorityEnum, SentimentEnum
from triage_gateway.models.llm_models import ChatMessage
from triage_gateway.models.results import NO_REPLY_NEEDED


logger = structlog.get_logger(__name__)


SYSTEM_TEMPLATE = "system_prompt.txt"
CLASSIFY_TEMPLATE = "classify_prompt.txt"
SUMMARIZE_TEMPLATE = "summarize_prompt.txt"


class PromptBuilder:
    """
    Build chat messages for one provider's prompt set.

    Each provider has its own template subdirectory (``prompt_set``) holding
    ``system_prompt.txt``, ``classify_prompt.txt`` and ``summarize_prompt.txt``.
    Templates are loaded once; rendering is pure.
    """

    def __init__(
        self,
        templates_dir: Path,
        prompt_set: str,
        body_truncation_limit: int = 2000,
    ):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing one subdirectory per prompt set
            prompt_set: Name of the subdirectory to use (e.g. "together")
            body_truncation_limit: Max body characters in summarization prompts

        Raises:
            GatewayConfigurationError: A template is missing
        """
        self.templates_dir = Path(templates_dir)
        self.prompt_set = prompt_set
        self.body_truncation_limit = body_truncation_limit

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir / prompt_set)),
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False  # We're generating prompts, not HTML
        )

        try:
            self.system_template = self.jinja_env.get_template(SYSTEM_TEMPLATE)
            self.classify_template = self.jinja_env.get_template(CLASSIFY_TEMPLATE)
            self.summarize_template = self.jinja_env.get_template(SUMMARIZE_TEMPLATE)
        except TemplateNotFound as e:
            logger.error(
                "Failed to load prompt templates",
                templates_dir=str(self.templates_dir),
                prompt_set=prompt_set,
                missing=e.name,
            )
            raise GatewayConfigurationError(
                f"Prompt template not found: {prompt_set}/{e.name}",
                details={"templates_dir": str(self.templates_dir), "prompt_set": prompt_set},
            ) from e

        logger.info(
            "PromptBuilder initialized",
            templates_dir=str(self.templates_dir),
            prompt_set=prompt_set,
            body_truncation_limit=body_truncation_limit,
        )

    def build_system_prompt(self) -> str:
        return self.system_template.render().strip()

    def build_classification_prompt(self, subject: str, body: str) -> str:
        """
        Render the classification prompt.

        Only the subject and the first line of the body are sent.
        """
        return self.classify_template.render(
            subject=subject,
            first_line=first_line(body),
            priorities=[p.value for p in (PriorityEnum.HIGH, PriorityEnum.MEDIUM, PriorityEnum.LOW)],
            sentiments=[s.value for s in SentimentEnum if s is not SentimentEnum.UNKNOWN],
            labels=[label.value for label in LabelEnum],
            intents=[intent.value for intent in IntentEnum],
        ).strip()

    def build_summary_prompt(self, body: str, summary_length: int, reply_length: int) -> str:
        """Render the summarize-and-reply prompt with the truncated body."""
        return self.summarize_template.render(
            body=truncate_with_marker(body, self.body_truncation_limit),
            summary_length=summary_length,
            reply_length=reply_length,
            no_reply_text=NO_REPLY_NEEDED,
        ).strip()

    def classification_messages(self, subject: str, body: str) -> tuple[ChatMessage, ...]:
        return (
            ChatMessage(role="system", content=self.build_system_prompt()),
            ChatMessage(role="user", content=self.build_classification_prompt(subject, body)),
        )

    def summary_messages(
        self, body: str, summary_length: int, reply_length: int
    ) -> tuple[ChatMessage, ...]:
        return (
            ChatMessage(role="system", content=self.build_system_prompt()),
            ChatMessage(
                role="user",
                content=self.build_summary_prompt(body, summary_length, reply_length),
            ),
        )
