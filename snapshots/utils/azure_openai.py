from openai import AzureOpenAI, OpenAIError
from snapshots.config import settings
from snapshots.exceptions import ServiceError
from typing import Optional
import asyncio
import logging

logger = logging.getLogger(__name__)

SNAPSHOT_PROMPT = """
Provide a high-level overview and related areas of interest for {topic}.

Based on this overview and related areas of interest, return content related to {topic} that users might be interested in.

Please use a concise, fun, and easy-to-understand tone for the content and use emojis only when is actually suitable. Provide examples like code or table or any formats Markdown supports when is necessary.

Use markdown format for the summary, including tables, code snippets, images, and interactive elements like quizzes and polls to make the content engaging and fun.

Ensure each summary is short enough to fit on one screen, so users can keep swiping and exploring all the related content.

Strictly respond in the following format without adding any thing, no need to mark the response in markdown as json

[
{{
"title": "title",
"summary": "summary"
}}]
"""

OVERVIEW_PROMPT = """
Provide a short, high-level overview of {topic} for a curious learner.
Keep it to one or two paragraphs of plain prose.
"""

CONTENT_AREAS_PROMPT = """
Here is an overview of {topic}:

{overview}

Based on this overview, list exactly {count} main content areas a learner should explore to understand {topic}.
Return only the area names, one per line, with no numbering, bullets or extra text.
"""

DETAILED_CONTENT_PROMPT = """
Explain "{area}" as part of learning about {topic} in about 100 words.
Break the explanation into short subtopic lines, one per line, with no numbering or bullets.
"""


class AzureOpenAIClient:
    """Model-service client. Every call is a single prompt-in, text-out round trip."""

    def __init__(self, deployment_name: Optional[str] = None, temperature: Optional[float] = None):
        self.deployment_name = deployment_name or settings.azure_openai_deployment_name
        self.temperature = settings.temperature if temperature is None else temperature
        self._client: Optional[AzureOpenAI] = None

    @property
    def client(self) -> AzureOpenAI:
        if self._client is None:
            try:
                self._client = AzureOpenAI(
                    azure_endpoint=settings.azure_openai_endpoint,
                    api_key=settings.azure_openai_api_key,
                    api_version=settings.azure_openai_api_version
                )
            except OpenAIError as e:
                raise ServiceError(f"Model service is not configured: {e}") from e
        return self._client

    def _complete(self, prompt: str) -> Optional[str]:
        try:
            response = self.client.chat.completions.create(
                model=self.deployment_name,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature
            )
        except OpenAIError as e:
            raise ServiceError(f"Model service error: {e}") from e

        if not response.choices or not response.choices[0].message:
            return None
        return response.choices[0].message.content

    async def generate_text(self, prompt: str) -> Optional[str]:
        """Run one completion on a worker thread and return its text, or None."""
        return await asyncio.to_thread(self._complete, prompt.strip())

    async def generate_snapshot_cards(self, topic: str) -> Optional[str]:
        logger.debug(f"[SNAPSHOT] Requesting snapshot cards for topic: {topic}")
        return await self.generate_text(SNAPSHOT_PROMPT.format(topic=topic))

    async def generate_topic_overview(self, topic: str) -> Optional[str]:
        logger.debug(f"[OVERVIEW] Requesting overview for topic: {topic}")
        return await self.generate_text(OVERVIEW_PROMPT.format(topic=topic))

    async def generate_main_content_areas(self, topic: str, overview: str, count: int = 3) -> Optional[str]:
        logger.debug(f"[AREAS] Requesting {count} content areas for topic: {topic}")
        return await self.generate_text(
            CONTENT_AREAS_PROMPT.format(topic=topic, overview=overview, count=count)
        )

    async def generate_detailed_content(self, topic: str, area: str) -> Optional[str]:
        logger.debug(f"[DETAILS] Requesting details for area: {area}")
        return await self.generate_text(DETAILED_CONTENT_PROMPT.format(topic=topic, area=area))


# Create global instance
azure_client = AzureOpenAIClient()
