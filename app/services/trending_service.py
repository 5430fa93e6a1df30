# /app/services/trending_service.py

"""
Trending topics: fetch the RSS feed, pull topics out of it, and make sure
every topic leaves this module with a description.

The feed is read with positional pattern matching rather than a full XML
parse. Every field degrades to "" when its tag is missing or malformed.
"""

import asyncio
import re
from typing import List, Optional

import requests

from app.core.config import ProviderSettings
from app.core.exceptions import NotFoundError, UpstreamProviderError
from app.models.topic_model import TrendingTopic
from . import prompt_library
from .groq_service import GroqClient
from .llm_output import parse_json_array

MAX_TOPICS = 8
FEED_TIMEOUT_SECONDS = 15

# &amp; is decoded last so "&amp;lt;" stays "&lt;" instead of becoming "<".
_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&apos;", "'"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)

_FIELD_PATTERNS = {
    "title": re.compile(r"<title>([^<]*)</title>"),
    "traffic": re.compile(r"<ht:approx_traffic>([^<]*)</ht:approx_traffic>"),
    "picture": re.compile(r"<ht:picture>([^<]*)</ht:picture>"),
    "picture_source": re.compile(r"<ht:picture_source>([^<]*)</ht:picture_source>"),
    "news_title": re.compile(r"<ht:news_item_title>([^<]*)</ht:news_item_title>"),
    "news_snippet": re.compile(r"<ht:news_item_snippet>([^<]+)</ht:news_item_snippet>"),
    "news_url": re.compile(r"<ht:news_item_url>([^<]*)</ht:news_item_url>"),
}


def decode_entities(text: str) -> str:
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def _extract(block: str, field: str) -> str:
    match = _FIELD_PATTERNS[field].search(block)
    return match.group(1).strip() if match else ""


def parse_trending_feed(xml_text: str, limit: int = MAX_TOPICS) -> List[TrendingTopic]:
    """
    Turns the raw feed text into at most `limit` topics.

    Only the first `limit` <item> blocks are examined; blocks without a title
    are dropped, so the result can be shorter than the number of items.
    """
    item_blocks = (xml_text or "").split("<item>")[1:]
    topics = []

    for block in item_blocks[:limit]:
        title = decode_entities(_extract(block, "title"))
        if not title:
            continue
        topics.append(TrendingTopic(
            title=title,
            traffic=_extract(block, "traffic"),
            picture=_extract(block, "picture"),
            pictureSource=decode_entities(_extract(block, "picture_source")),
            newsTitle=decode_entities(_extract(block, "news_title") or title),
            description=decode_entities(_extract(block, "news_snippet")),
            newsUrl=_extract(block, "news_url"),
        ))

    return topics


def fetch_feed_xml(url: str) -> str:
    try:
        response = requests.get(url, timeout=FEED_TIMEOUT_SECONDS)
    except requests.exceptions.RequestException as e:
        print(f"ERROR fetching trending feed: {e}")
        raise UpstreamProviderError("Failed to fetch trending topics from Google Trends") from e
    if not response.ok:
        print(f"ERROR fetching trending feed: HTTP {response.status_code}")
        raise UpstreamProviderError("Failed to fetch trending topics from Google Trends")
    return response.text


async def backfill_descriptions(topics: List[TrendingTopic], text_client: Optional[GroqClient]) -> None:
    """
    Asks the text provider, in one batched call, for descriptions of every
    topic that has none. Best effort: any failure is logged and ignored.
    """
    needs_description = [t for t in topics if not t.description]
    if not needs_description or text_client is None or not text_client.is_configured:
        return

    prompt = prompt_library.TOPIC_DESCRIPTION_PROMPT.format(
        topic_names=", ".join(t.title for t in needs_description)
    )

    try:
        result = await text_client.complete(prompt, temperature=0.7, max_tokens=1024)
    except Exception as e:
        print(f"[TRENDING] Description backfill failed: {e}")
        return

    entries = parse_json_array(result.text or "[]")
    if entries is None:
        print(f"[TRENDING] Description backfill returned unparsable content: {result.text[:200]}")
        return

    for entry in entries:
        if not isinstance(entry, dict):
            continue
        title = entry.get("title")
        description = entry.get("description")
        if not isinstance(title, str) or not isinstance(description, str) or not description.strip():
            continue
        wanted = title.lower()
        topic = next((t for t in topics if t.title.lower() == wanted and not t.description), None)
        if topic is not None:
            topic.description = description.strip()


def apply_fallback_descriptions(topics: List[TrendingTopic]) -> None:
    for topic in topics:
        if not topic.description:
            topic.description = prompt_library.FALLBACK_TOPIC_DESCRIPTION.format(
                title=topic.title, traffic=topic.traffic
            )


class TrendingService:
    def __init__(self, settings: ProviderSettings, text_client: Optional[GroqClient] = None):
        self.settings = settings
        self.text_client = text_client

    async def get_trending_topics(self) -> List[TrendingTopic]:
        xml_text = await asyncio.to_thread(fetch_feed_xml, self.settings.trends_rss_url)

        topics = parse_trending_feed(xml_text)
        if not topics:
            raise NotFoundError("No trending topics found")

        await backfill_descriptions(topics, self.text_client)
        apply_fallback_descriptions(topics)
        return topics
