import re

# Applied in order; only this small tag/entity set is understood.
_REWRITES = [
    (re.compile(r"</li>\s*<li>"), "\n- "),
    (re.compile(r"<li>"), "- "),
    (re.compile(r"</li>"), "\n"),
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"<[^>]*>"), ""),
    (re.compile(r"&nbsp;"), " "),
    (re.compile(r"&quot;"), '"'),
    (re.compile(r"&#39;"), "'"),
    (re.compile(r"&amp;"), "&"),
    (re.compile(r"\n{2,}"), "\n"),
]


def html_to_text(html: str = "") -> str:
    """
    Flatten Shopify descriptionHtml into plain text a voice agent can read out.

      "<li>A</li><li>B</li>" => "- A\\n- B"
      "X<br>Y"               => "X\\nY"
    """
    s = html or ""
    for pattern, repl in _REWRITES:
        s = pattern.sub(repl, s)
    return s.strip()
