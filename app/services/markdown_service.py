# /app/services/markdown_service.py

"""
A small, line-oriented Markdown to HTML converter for generated blog bodies.

It is not a general Markdown parser. It understands exactly:

* `# ` and `## ` headings (both rendered as <h2>) and `### ` (<h3>)
* `> ` quoted lines, one <p> each, grouped into a single <blockquote>
* `- ` / `* ` list items grouped into a single <ul>
* `**bold**` / `__bold__` and `*italic*` / `_italic_`
* blank lines as block separators; anything else becomes a <p>

The converter tracks two flags: list open and quote open.
"""

import html
import re

# Order matters: the double markers must be consumed before the single ones.
_INLINE_RULES = (
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"__(.+?)__"), r"<strong>\1</strong>"),
    (re.compile(r"_(.+?)_"), r"<em>\1</em>"),
)


def render_inline(text: str) -> str:
    rendered = html.escape(text, quote=False)
    for pattern, replacement in _INLINE_RULES:
        rendered = pattern.sub(replacement, rendered)
    return rendered


class _BlockState:
    def __init__(self):
        self.out = []
        self.in_list = False
        self.in_blockquote = False

    def close_list(self):
        if self.in_list:
            self.out.append("</ul>")
            self.in_list = False

    def close_blockquote(self):
        if self.in_blockquote:
            self.out.append("</blockquote>")
            self.in_blockquote = False

    def close_open(self):
        self.close_list()
        self.close_blockquote()


def markdown_to_html(markdown: str) -> str:
    state = _BlockState()

    for line in (markdown or "").split("\n"):
        t = line.strip()

        if t.startswith("### "):
            state.close_open()
            state.out.append(f"<h3>{render_inline(t[4:])}</h3>")
        elif t.startswith("## "):
            state.close_open()
            state.out.append(f"<h2>{render_inline(t[3:])}</h2>")
        elif t.startswith("# "):
            state.close_open()
            state.out.append(f"<h2>{render_inline(t[2:])}</h2>")
        elif t.startswith("> "):
            state.close_list()
            if not state.in_blockquote:
                state.out.append("<blockquote>")
                state.in_blockquote = True
            state.out.append(f"<p>{render_inline(t[2:])}</p>")
        elif t.startswith("- ") or t.startswith("* "):
            state.close_blockquote()
            if not state.in_list:
                state.out.append("<ul>")
                state.in_list = True
            state.out.append(f"<li>{render_inline(t[2:])}</li>")
        elif t == "":
            state.close_open()
        else:
            state.close_open()
            state.out.append(f"<p>{render_inline(t)}</p>")

    state.close_open()
    return "\n".join(state.out)
