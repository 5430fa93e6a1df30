# /app/services/blog_service.py

"""
Blog generation: the article text (Groq) and its featured image (Gemini) are
requested concurrently, then combined, converted to HTML and saved.

The two paths fail differently. A text failure fails the whole request; an
image failure, including a missing Gemini key, leaves the blog without an
image. That policy lives in `resolve_blog_outcomes` so it can be tested on
its own.
"""

import asyncio
import json
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ValidationError, field_validator

from app.core.exceptions import ConfigurationError, InvalidInputError, UpstreamProviderError
from app.db.models.generation_models import GenerationType
from app.models.generation_model import BlogBundle, BlogResult
from . import history_service, prompt_library, topic_service
from .database_service import DatabaseService
from .gemini_service import GeminiImageClient, InlineImage
from .groq_service import GroqClient
from .llm_output import extract_json_object, strip_code_fences
from .markdown_service import markdown_to_html

EMPTY_IMAGE = InlineImage(data="", mime_type="")

PARSE_FAILURE_MESSAGE = "Failed to parse blog content, please try again"
TRUNCATED_MESSAGE = "Blog generation was cut short, please try again"


class BlogDraft(BaseModel):
    """The four fields the text model is asked to return."""
    title: str = ""
    metaDescription: str = ""
    readTime: str = ""
    body: str

    @field_validator("title", "metaDescription", "readTime", "body", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> Any:
        # Models occasionally emit readTime as a bare number.
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value


def parse_blog_draft(raw: str) -> BlogDraft:
    """
    Parses the model's JSON reply, tolerating code fences and surrounding
    prose. Anything unusable becomes a generic retry-able error.
    """
    candidate = extract_json_object(strip_code_fences(raw))
    try:
        parsed = json.loads(candidate)
        if not isinstance(parsed, dict):
            raise ValueError("blog payload is not a JSON object")
        draft = BlogDraft.model_validate(parsed)
    except (ValueError, ValidationError) as e:
        # json.JSONDecodeError is a ValueError subclass.
        print(f"ERROR parsing blog JSON ({e}): {candidate[:200]}")
        raise UpstreamProviderError(PARSE_FAILURE_MESSAGE) from e

    if not draft.body.strip():
        raise UpstreamProviderError(PARSE_FAILURE_MESSAGE)
    return draft


async def generate_blog_text(text_client: GroqClient, topic_title: str, topic_description: Optional[str]) -> BlogDraft:
    user_message = prompt_library.BLOG_USER_PROMPT.format(
        topic_title=topic_title,
        topic_context=topic_description or prompt_library.DEFAULT_TOPIC_CONTEXT,
    )
    result = await text_client.complete(
        user_message,
        system_message=prompt_library.BLOG_SYSTEM_PROMPT,
        temperature=0.7,
        max_tokens=8192,
        json_mode=True,
    )

    # A length-truncated reply is cut-off JSON; never try to salvage it.
    if result.finish_reason == "length":
        print("[BLOG] Groq response truncated (finish_reason=length)")
        raise UpstreamProviderError(TRUNCATED_MESSAGE)
    if not result.text:
        raise UpstreamProviderError("Groq returned empty content")

    return parse_blog_draft(result.text)


async def generate_featured_image(
    image_client: GeminiImageClient, topic_title: str, topic_description: Optional[str]
) -> InlineImage:
    prompt = prompt_library.BLOG_IMAGE_PROMPT.format(
        topic_title=topic_title,
        topic_context=topic_description or prompt_library.DEFAULT_TOPIC_CONTEXT,
    )
    return await image_client.generate_image(prompt)


def resolve_blog_outcomes(
    text_outcome: Union[BlogDraft, BaseException],
    image_outcome: Union[InlineImage, BaseException],
) -> Tuple[BlogDraft, InlineImage]:
    """
    Applies the per-path policy to the two joined results:
    the text path is mandatory, the image path is optional.
    """
    if isinstance(text_outcome, BaseException):
        raise text_outcome

    if isinstance(image_outcome, BaseException):
        print(f"[BLOG] Featured image unavailable, continuing without it: {image_outcome}")
        return text_outcome, EMPTY_IMAGE
    return text_outcome, image_outcome


class BlogGenerator:
    def __init__(self, text_client: GroqClient, image_client: GeminiImageClient):
        self.text_client = text_client
        self.image_client = image_client

    async def generate(self, topic_title: Optional[str], topic_description: Optional[str] = None) -> BlogBundle:
        if not self.text_client.is_configured:
            raise ConfigurationError("Groq API key is not configured")
        if not topic_title or not topic_title.strip():
            raise InvalidInputError("Topic title is required")
        topic_title = topic_title.strip()

        text_outcome, image_outcome = await asyncio.gather(
            generate_blog_text(self.text_client, topic_title, topic_description),
            generate_featured_image(self.image_client, topic_title, topic_description),
            return_exceptions=True,
        )
        draft, image = resolve_blog_outcomes(text_outcome, image_outcome)

        return BlogBundle(
            title=draft.title or topic_title,
            metaDescription=draft.metaDescription,
            readTime=draft.readTime,
            body=draft.body,
            htmlBody=markdown_to_html(draft.body),
            imageData=image.data,
            imageMime=image.mime_type,
        )


async def generate_and_save_blog(
    db: DatabaseService,
    user_id: str,
    generator: BlogGenerator,
    topic_title: Optional[str],
    topic_description: Optional[str] = None,
) -> BlogResult:
    """Generates a blog, files it under its topic, and records it in the user's history."""
    bundle = await generator.generate(topic_title, topic_description)

    topic, _ = topic_service.find_or_create_topic(
        db, title=topic_title.strip(), description=topic_description or ""
    )
    generation = history_service.create_generation(
        db,
        user_id=user_id,
        topic_id=topic.id,
        generation_type=GenerationType.BLOG,
        content=bundle.model_dump_json(),
    )
    return BlogResult(generationId=generation.id, **bundle.model_dump())
