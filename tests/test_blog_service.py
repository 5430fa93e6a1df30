# /tests/test_blog_service.py

import json

import pytest

from app.core.exceptions import ConfigurationError, UpstreamProviderError
from app.db.models.generation_models import GenerationType
from app.services import blog_service
from app.services.blog_service import (
    EMPTY_IMAGE,
    BlogDraft,
    BlogGenerator,
    parse_blog_draft,
    resolve_blog_outcomes,
)
from app.services.gemini_service import InlineImage

BLOG_JSON = json.dumps({
    "title": "Why Everyone Is Talking About Mars",
    "metaDescription": "A quick look at the landing.",
    "readTime": "5 min read",
    "body": "# Mars\n\n## Introduction\nIt **landed**.\n- one\n- two",
})


# --- Parsing ---

def test_parse_plain_json():
    draft = parse_blog_draft(BLOG_JSON)
    assert draft.title == "Why Everyone Is Talking About Mars"
    assert draft.readTime == "5 min read"


@pytest.mark.parametrize("wrapped", [
    f"```json\n{BLOG_JSON}\n```",
    f"```\n{BLOG_JSON}\n```",
    f"Sure! Here is your blog post:\n{BLOG_JSON}\nHope this helps.",
    f"```JSON\nHere you go: {BLOG_JSON} enjoy\n```",
])
def test_parse_tolerates_fences_and_prose(wrapped):
    assert parse_blog_draft(wrapped).body.startswith("# Mars")


def test_parse_coerces_numeric_read_time():
    draft = parse_blog_draft('{"title": "t", "metaDescription": "m", "readTime": 5, "body": "b"}')
    assert draft.readTime == "5"


@pytest.mark.parametrize("raw", [
    "not json at all",
    '{"title": "missing body"}',
    '{"title": "t", "body": "   "}',
    "[1, 2, 3]",
    '{"title": "t", "body": "unterminated',
])
def test_parse_failure_is_generic_retry_error(raw):
    with pytest.raises(UpstreamProviderError, match="please try again"):
        parse_blog_draft(raw)


# --- Text path ---

@pytest.mark.asyncio
async def test_blog_text_truncated_completion_always_fails(fake_text_client):
    # Even a perfectly parseable body is rejected when the reply was cut short.
    client = fake_text_client(text=BLOG_JSON, finish_reason="length")
    with pytest.raises(UpstreamProviderError, match="cut short"):
        await blog_service.generate_blog_text(client, "Mars", None)


@pytest.mark.asyncio
async def test_blog_text_empty_content_fails(fake_text_client):
    with pytest.raises(UpstreamProviderError):
        await blog_service.generate_blog_text(fake_text_client(text=""), "Mars", None)


@pytest.mark.asyncio
async def test_blog_text_requests_json_mode(fake_text_client):
    client = fake_text_client(text=BLOG_JSON)
    await blog_service.generate_blog_text(client, "Mars", "Landing day")
    call = client.calls[0]
    assert call["json_mode"] is True
    assert call["max_tokens"] == 8192
    assert "Topic: Mars" in call["user_message"]
    assert "Context: Landing day" in call["user_message"]


# --- Per-path policy ---

def test_resolve_keeps_both_successes():
    draft = BlogDraft(body="b")
    image = InlineImage(data="QUJD", mime_type="image/png")
    assert resolve_blog_outcomes(draft, image) == (draft, image)


@pytest.mark.parametrize("image_error", [
    ConfigurationError("Gemini API key is not configured"),
    UpstreamProviderError("Gemini did not return an image"),
    RuntimeError("unexpected"),
])
def test_resolve_degrades_image_failures(image_error):
    draft = BlogDraft(body="b")
    assert resolve_blog_outcomes(draft, image_error) == (draft, EMPTY_IMAGE)


@pytest.mark.parametrize("text_error", [
    UpstreamProviderError("Blog generation was cut short, please try again"),
    ConfigurationError("Groq API key is not configured"),
])
def test_resolve_fails_on_text_failure(text_error):
    with pytest.raises(type(text_error)):
        resolve_blog_outcomes(text_error, InlineImage(data="QUJD", mime_type="image/png"))


# --- Generator ---

@pytest.mark.asyncio
async def test_generator_combines_text_and_image(fake_text_client, fake_image_client):
    image_client = fake_image_client(image=InlineImage(data="QUJD", mime_type="image/png"))
    bundle = await BlogGenerator(fake_text_client(text=BLOG_JSON), image_client).generate("Mars")

    assert bundle.imageData == "QUJD"
    assert bundle.imageMime == "image/png"
    assert bundle.htmlBody.startswith("<h2>Mars</h2>")
    assert "<p>It <strong>landed</strong>.</p>" in bundle.htmlBody
    assert "header image" in image_client.prompts[0]


@pytest.mark.asyncio
async def test_generator_without_image_provider_succeeds_with_empty_image(fake_text_client, fake_image_client):
    bundle = await BlogGenerator(
        fake_text_client(text=BLOG_JSON), fake_image_client(configured=False)
    ).generate("Mars")
    assert bundle.imageData == ""
    assert bundle.imageMime == ""
    assert bundle.title == "Why Everyone Is Talking About Mars"


@pytest.mark.asyncio
async def test_generator_text_failure_fails_request(fake_text_client, fake_image_client):
    generator = BlogGenerator(fake_text_client(error=UpstreamProviderError("HTTP 500")), fake_image_client())
    with pytest.raises(UpstreamProviderError):
        await generator.generate("Mars")


@pytest.mark.asyncio
async def test_generator_missing_text_key_is_configuration_error(fake_text_client, fake_image_client):
    image_client = fake_image_client()
    with pytest.raises(ConfigurationError):
        await BlogGenerator(fake_text_client(configured=False), image_client).generate("Mars")
    # Nothing is launched when the mandatory path cannot run.
    assert image_client.prompts == []


@pytest.mark.asyncio
async def test_generator_requires_title(fake_text_client, fake_image_client):
    with pytest.raises(ValueError):
        await BlogGenerator(fake_text_client(text=BLOG_JSON), fake_image_client()).generate("  ")


# --- Persistence ---

@pytest.mark.asyncio
async def test_generate_and_save_blog_persists_bundle(db_service, make_user, fake_text_client, fake_image_client):
    user, _ = make_user()
    generator = BlogGenerator(fake_text_client(text=BLOG_JSON), fake_image_client())

    result = await blog_service.generate_and_save_blog(db_service, user.id, generator, "Mars", "Landing day")

    stored = db_service.get_generation_by_id(result.generationId)
    assert stored.type == GenerationType.BLOG
    assert stored.user_id == user.id
    assert stored.topic.title == "Mars"
    assert stored.topic.description == "Landing day"
    content = json.loads(stored.content)
    assert list(content.keys()) == [
        "title", "metaDescription", "readTime", "body", "htmlBody", "imageData", "imageMime",
    ]
    assert content["htmlBody"] == result.htmlBody


@pytest.mark.asyncio
async def test_generate_and_save_blog_reuses_topic(db_service, make_user, fake_text_client, fake_image_client):
    user, _ = make_user()
    first = await blog_service.generate_and_save_blog(
        db_service, user.id, BlogGenerator(fake_text_client(text=BLOG_JSON), fake_image_client()), "Mars"
    )
    second = await blog_service.generate_and_save_blog(
        db_service, user.id, BlogGenerator(fake_text_client(text=BLOG_JSON), fake_image_client()), "Mars"
    )
    topic_ids = {db_service.get_generation_by_id(g.generationId).topic_id for g in (first, second)}
    assert len(topic_ids) == 1
