"""
Utils package initialization
"""

from .extractors import (
    best_effort_html_span,
    detect_language,
    extract_fenced_code,
    extract_html_snippet,
    extract_image_url,
    run_heuristics,
    strip_comment_style,
    wrap_code_as_comment_style,
)

__all__ = [
    'best_effort_html_span',
    'detect_language',
    'extract_fenced_code',
    'extract_html_snippet',
    'extract_image_url',
    'run_heuristics',
    'strip_comment_style',
    'wrap_code_as_comment_style',
]
