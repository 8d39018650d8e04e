"""
Response normalizer - turns raw model output into an ExtractionResult

The model is asked for JSON but does not always comply, so parsing falls back
step by step and the heuristics fill whatever is still missing from the
caller's original text.
"""

import json
from dataclasses import dataclass
from typing import Optional

from .log import logger
from .utils.extractors import extract_fenced_code, extract_image_url

FIELDS = ("Code", "Language", "Text", "ImageUrl")

# "image_url", "imageUrl" and "ImageUrl" all land on ImageUrl
_FIELD_KEYS = {name.lower(): name for name in FIELDS}


@dataclass
class ExtractionResult:
    Code: Optional[str] = None
    Language: Optional[str] = None
    Text: Optional[str] = None
    ImageUrl: Optional[str] = None

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in FIELDS}


def _field_name(key):
    return _FIELD_KEYS.get(str(key).replace('_', '').replace('-', '').lower())


def _clean_value(value):
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        value = json.dumps(value, ensure_ascii=False)
    elif not isinstance(value, str):
        value = str(value)
    return value if value.strip() else None


def _balanced_end(text, start):
    """Index just past the brace closing text[start], None when it never closes"""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return index + 1

    return None


def iter_json_objects(text):
    """Balanced {...} substrings in order; an unclosed '{' is skipped, not fatal"""
    start = text.find('{')
    while start != -1:
        end = _balanced_end(text, start)
        if end is not None:
            yield text[start:end]
        start = text.find('{', start + 1)


def find_json_object(text):
    """
    First balanced {...} substring, skipping braces inside string literals
    Returns: substring or None
    """
    return next(iter_json_objects(text), None)


def parse_model_json(output):
    """
    Parse model output as a JSON object, whole or embedded
    Returns: dict or None
    """
    try:
        parsed = json.loads(output)
        if isinstance(parsed, dict):
            return parsed
    except ValueError:
        pass

    for candidate in iter_json_objects(output):
        try:
            parsed = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(parsed, dict):
            return parsed

    return None


def normalize_response(model_output, original_text, default_text=None):
    """
    Build a complete ExtractionResult.
    default_text=None means "fall back to the original input".
    """
    model_output = model_output or ""
    result = ExtractionResult()

    parsed = parse_model_json(model_output)
    if parsed is None:
        logger.debug("Model output is not JSON, keeping it as Text")
        result.Text = _clean_value(model_output)
    else:
        for key, value in parsed.items():
            name = _field_name(key)
            if name:
                setattr(result, name, _clean_value(value))

    if not result.Code:
        fenced = extract_fenced_code(original_text)
        if fenced and fenced[1]:
            result.Language, result.Code = fenced

    if not result.ImageUrl:
        result.ImageUrl = extract_image_url(original_text)

    if not result.Text:
        result.Text = original_text if default_text is None else default_text

    return result
