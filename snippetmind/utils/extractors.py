"""
Heuristic extractors - Regex checks for code, HTML and image URLs in raw text
None of these call a model; a missing match returns None.
"""

import re


# First fenced block only. The tag has to be followed by whitespace,
# otherwise ```print(1)``` would read "print" as the language.
FENCED_CODE_PATTERN = re.compile(r'```(?:([^\s`]+)(?=\s))?\s*([\s\S]*?)```')

OPENING_TAG_PATTERN = re.compile(r'<([a-zA-Z][\w-]*)[^>]*>')

MARKDOWN_IMAGE_PATTERN = re.compile(r'!\[[^\]]*\]\(\s*<?(https?://[^\s)>]+)>?(?:\s+"[^"]*")?\s*\)')

IMAGE_URL_PATTERN = re.compile(
    r'(https?://[^\s<>"\'()\[\]]+\.(?:png|jpe?g|gif|webp|svg))(?!\w)',
    re.IGNORECASE,
)

# Ordered: first match wins
LANGUAGE_SIGNATURES = [
    ('javascript', re.compile(r'\bfunction\b|console\.log|=>')),
    ('python', re.compile(r'\bdef |\bimport\s.+\sfrom\b')),
    ('c', re.compile(r'#include|\bint main\b')),
]

COMMENT_OPEN = '<!--'
COMMENT_CLOSE = '-->'
# Terminator the early prompts asked models to emit
LEGACY_COMMENT_CLOSE = '->'


def detect_language(code):
    """
    Guess a language from the code itself
    Returns: language name, "unknown" when nothing matches
    """
    if code.lstrip().startswith('<'):
        return 'html'

    for language, pattern in LANGUAGE_SIGNATURES:
        if pattern.search(code):
            return language

    return 'unknown'


def extract_fenced_code(text):
    """
    Find the first ``` fenced block
    Returns: (language, code) or None
    """
    match = FENCED_CODE_PATTERN.search(text)
    if not match:
        return None

    code = match.group(2).strip()
    language = match.group(1) or detect_language(code)
    return language, code


def best_effort_html_span(text):
    """
    Everything from the first '<' to the last '>'.
    Lossy: trailing prose after the markup gets swept in when it contains a '>'.
    """
    start = text.find('<')
    end = text.rfind('>')
    if start == -1 or end <= start:
        return None
    return text[start:end + 1]


def extract_html_snippet(text):
    """
    Pull an HTML fragment out of free text
    Returns: snippet string or None
    """
    opening = OPENING_TAG_PATTERN.search(text)
    if not opening:
        return None

    tag = re.escape(opening.group(1))
    balanced = re.search(rf'<{tag}\b[^>]*>[\s\S]*?</{tag}\s*>', text, re.IGNORECASE)
    if balanced:
        return balanced.group(0)

    return best_effort_html_span(text)


def extract_image_url(text):
    """Markdown image link first, then any bare image URL"""
    match = MARKDOWN_IMAGE_PATTERN.search(text)
    if match:
        return match.group(1)

    match = IMAGE_URL_PATTERN.search(text)
    if match:
        return match.group(1)

    return None


def wrap_code_as_comment_style(code):
    """Wrap HTML-looking code as <!-- code -->, leave everything else alone"""
    if not code:
        return code

    stripped = code.strip()
    if stripped.startswith(COMMENT_OPEN):
        return code

    if stripped.startswith('<'):
        return f"{COMMENT_OPEN} {stripped} {COMMENT_CLOSE}"

    return code


def strip_comment_style(code):
    """Undo wrap_code_as_comment_style (also accepts the legacy '->' terminator)"""
    if not code:
        return code

    stripped = code.strip()
    if not stripped.startswith(COMMENT_OPEN):
        return code

    inner = stripped[len(COMMENT_OPEN):]
    if inner.endswith(COMMENT_CLOSE):
        inner = inner[:-len(COMMENT_CLOSE)]
    elif inner.endswith(LEGACY_COMMENT_CLOSE):
        inner = inner[:-len(LEGACY_COMMENT_CLOSE)]

    return inner.strip()


def run_heuristics(text):
    """
    Run every extractor over raw input
    Returns: dict with Code, Language and ImageUrl (None where nothing matched)
    """
    found = {'Code': None, 'Language': None, 'ImageUrl': extract_image_url(text)}

    fenced = extract_fenced_code(text)
    if fenced:
        found['Language'], found['Code'] = fenced
        return found

    snippet = extract_html_snippet(text)
    if snippet:
        found['Code'] = snippet
        found['Language'] = 'html'

    return found
