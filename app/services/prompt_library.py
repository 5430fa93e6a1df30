# /app/services/prompt_library.py

"""
Central library for every prompt the generators send to the AI providers.
Prompts are plain `str.format` templates; callers substitute the topic title
and context.
"""

DEFAULT_TOPIC_CONTEXT = "A currently trending topic."


# --- Trending: description backfill ---

TOPIC_DESCRIPTION_PROMPT = """For each of these trending topics, write a 2-sentence simple description that a general audience can understand. Avoid jargon.

Topics: {topic_names}

Return ONLY a JSON array where each object has:
- title: the exact topic name as given
- description: your 2-sentence explanation
Return ONLY the JSON array, no extra text."""

FALLBACK_TOPIC_DESCRIPTION = (
    "{title} is currently trending with {traffic} searches. "
    "Click to learn more and create content about this topic."
)


# --- Video script ---

SCRIPT_SYSTEM_PROMPT = (
    "You are an expert YouTube and short-form video scriptwriter. You write engaging, "
    "conversational scripts that hook viewers immediately and keep them watching till the end."
)

SCRIPT_USER_PROMPT = """Write a complete video script for the following trending topic.

Topic: {topic_title}
Context: {topic_context}

Structure the script EXACTLY like this:

🎬 HOOK (0–15 seconds)
[Attention-grabbing opening line. Make it shocking, curious or bold.]

📖 INTRO (15–30 seconds)
[Briefly tell viewers what this video is about and why it matters to them.]

🔍 SECTION 1 — [Give it a relevant title]
[Explain the first key point clearly. Use simple language.]

🔍 SECTION 2 — [Give it a relevant title]
[Explain the second key point. Add interesting facts or context.]

🔍 SECTION 3 — [Give it a relevant title]
[Explain the third key point. Include any controversy or drama if relevant.]

💡 KEY TAKEAWAY
[Summarize what the viewer should remember in 1–2 sentences.]

📢 OUTRO & CTA (last 20 seconds)
[Wrap up warmly. Ask viewers to like, comment their opinion, and subscribe. Suggest what video to watch next.]

Keep the tone: conversational, engaging, easy to understand. Avoid jargon. Write as if speaking directly to a viewer."""


# --- Thumbnail image ---

THUMBNAIL_IMAGE_PROMPT = """Create a bold, eye-catching YouTube thumbnail image for a video about:
Topic: {topic_title}
Context: {topic_context}
Style: High contrast, vibrant, news/media thumbnail style, photorealistic, landscape composition, warm energetic tones (oranges reds yellows), NO text overlays in the image."""


# --- Blog post ---

BLOG_SYSTEM_PROMPT = (
    "You are an expert blog writer and content creator. You write detailed, engaging, "
    "SEO-friendly blog posts that are easy to read, well structured, and informative. "
    "You always write in a warm, conversational yet professional tone."
)

# Literal braces in the JSON example are doubled for str.format.
BLOG_USER_PROMPT = """Write a complete, detailed blog post about the following trending topic.

Topic: {topic_title}
Context: {topic_context}

Return your response as a valid JSON object with these exact fields:
{{
  "title": "An engaging, SEO-friendly blog post title",
  "metaDescription": "A 150-160 character meta description for SEO",
  "readTime": "e.g. 5 min read",
  "body": "The full blog post in markdown format"
}}

Blog post structure must follow this format:

# {{Title}}

## Introduction
[2-3 engaging paragraphs that hook the reader and explain why this topic matters right now]

## Background / What You Need to Know
[2-3 paragraphs giving context and background]

## [Main Section 1 — give a relevant title]
[3-4 paragraphs with key details, facts, analysis]

## [Main Section 2 — give a relevant title]
[3-4 paragraphs with deeper insights, implications]

## [Main Section 3 — give a relevant title]
[2-3 paragraphs with current developments or controversy]

## Key Takeaways
[Bullet list of 4-5 most important points from the article]

## Conclusion
[2 paragraphs wrapping up with a forward-looking perspective]

Requirements:
- Minimum 800 words
- Use subheadings generously
- Include relevant statistics or facts where appropriate
- Conversational but professional tone
- No jargon, easy to understand
- Return ONLY the JSON object, no extra text, no markdown code fences around it"""

BLOG_IMAGE_PROMPT = """Create a professional, eye-catching featured blog post header image for an article about:
Topic: {topic_title}
Context: {topic_context}

Style requirements:
- Editorial/magazine style header image
- Professional and clean composition
- Warm tones: oranges, reds, yellows, golden hues
- Photorealistic or high quality illustrated style
- Wide landscape format (banner style)
- Visually represents the topic clearly
- NO text, NO words, NO letters in the image
- High quality, publication ready"""
