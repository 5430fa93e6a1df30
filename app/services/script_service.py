# /app/services/script_service.py

import math
import re
from typing import List, Optional

from app.core.exceptions import InvalidInputError, UpstreamProviderError
from app.models.generation_model import ScriptResult, ScriptSection
from . import prompt_library
from .groq_service import GroqClient

# Average narration pace for the speaking-time estimate.
SPEAKING_WORDS_PER_MINUTE = 140

SECTION_MARKERS = ("🎬", "📖", "🔍", "💡", "📢")
DEFAULT_SECTION_MARKER = "📄"

_MARKER_GROUP = "|".join(re.escape(m) for m in SECTION_MARKERS)
_SECTION_SPLIT = re.compile(f"(?={_MARKER_GROUP})")
_LEADING_MARKER = re.compile(f"^({_MARKER_GROUP})\\s*")


def count_words(text: str) -> int:
    return len(text.split())


def estimate_speaking_minutes(word_count: int) -> int:
    return math.ceil(word_count / SPEAKING_WORDS_PER_MINUTE)


def parse_script_sections(script: str) -> List[ScriptSection]:
    """
    Splits a script into display sections. Each marker emoji starts a new
    section; its first line is the heading and the rest is the body. Text
    before the first marker becomes an untitled section under the default
    marker, and sections with neither heading nor body are dropped.
    """
    sections = []
    for part in _SECTION_SPLIT.split(script or ""):
        trimmed = part.strip()
        if not trimmed:
            continue

        lines = trimmed.split("\n")
        marker_match = _LEADING_MARKER.match(lines[0])
        if marker_match:
            emoji = marker_match.group(1)
            title = lines[0][marker_match.end():].strip()
            content = "\n".join(lines[1:]).strip()
        else:
            # Unmarked lead-in text: the whole fragment is body.
            emoji = DEFAULT_SECTION_MARKER
            title = ""
            content = trimmed

        if title or content:
            sections.append(ScriptSection(emoji=emoji, title=title, content=content))
    return sections


class ScriptGenerator:
    def __init__(self, text_client: GroqClient):
        self.text_client = text_client

    async def generate(self, topic_title: Optional[str], topic_description: Optional[str] = None) -> ScriptResult:
        if not topic_title or not topic_title.strip():
            raise InvalidInputError("Topic title is required")

        user_message = prompt_library.SCRIPT_USER_PROMPT.format(
            topic_title=topic_title.strip(),
            topic_context=topic_description or prompt_library.DEFAULT_TOPIC_CONTEXT,
        )
        result = await self.text_client.complete(
            user_message,
            system_message=prompt_library.SCRIPT_SYSTEM_PROMPT,
            temperature=0.8,
            max_tokens=2048,
        )

        script = result.text.strip()
        if not script:
            raise UpstreamProviderError("Groq returned an empty script")

        word_count = count_words(script)
        return ScriptResult(
            script=script,
            wordCount=word_count,
            speakingMinutes=estimate_speaking_minutes(word_count),
            sections=parse_script_sections(script),
        )
