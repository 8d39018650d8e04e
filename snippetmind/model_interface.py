"""
Model Interface - Handles AI interactions
Supports Gemini (default) and OpenAI over their REST APIs
"""

import requests

from .config import ModelConfig
from .log import logger


def call_gemini_api(contents, config: ModelConfig, model=None, generation_config=None):
    """
    Call Gemini generateContent
    Returns: (response_json, error_message)
    """
    if not config.api_key:
        return None, "Gemini API key not set. Please add GEMINI_API_KEY to the environment."

    headers = {
        "x-goog-api-key": config.api_key,
        "Content-Type": "application/json"
    }

    data = {
        "contents": contents,
        "generationConfig": {"temperature": config.temperature, **(generation_config or {})}
    }

    url = f"{config.gemini_base_url}/models/{model or config.model}:generateContent"

    try:
        response = requests.post(url, headers=headers, json=data, timeout=config.timeout)

        if response.status_code == 200:
            return response.json(), None
        else:
            error = f"API Error {response.status_code}: {response.text}"
            return None, error

    except Exception as e:
        logger.exception("Gemini request failed")
        return None, str(e)


def call_openai_api(messages, config: ModelConfig):
    """
    Call OpenAI chat completions
    Returns: (content, error_message)
    """
    if not config.api_key:
        return None, "OpenAI API key not set. Please add OPENAI_API_KEY to the environment."

    headers = {
        "Authorization": f"Bearer {config.api_key}",
        "Content-Type": "application/json"
    }

    data = {
        "model": config.model,
        "messages": messages,
        "temperature": config.temperature
    }

    try:
        response = requests.post(
            f"{config.openai_base_url}/chat/completions",
            headers=headers,
            json=data,
            timeout=config.timeout
        )

        if response.status_code == 200:
            result = response.json()
            return result['choices'][0]['message']['content'], None
        else:
            error = f"API Error {response.status_code}: {response.text}"
            return None, error

    except Exception as e:
        logger.exception("OpenAI request failed")
        return None, str(e)


def gemini_parts(result):
    """Parts of the first candidate, [] when the response has none"""
    candidates = (result or {}).get('candidates') or []
    if not candidates:
        return []
    content = candidates[0].get('content') or {}
    return content.get('parts') or []


def gemini_text(result):
    """Concatenate the text parts of the first candidate"""
    return "".join(part.get('text', '') for part in gemini_parts(result))


def gemini_inline_image(result):
    """
    First inline binary part of the first candidate
    Returns: (base64_data, mime_type) or None
    """
    for part in gemini_parts(result):
        inline = part.get('inlineData') or part.get('inline_data')
        if inline and inline.get('data'):
            mime = inline.get('mimeType') or inline.get('mime_type') or 'image/png'
            return inline['data'], mime
    return None


class ModelClient:
    """Text and image generation against the configured provider"""

    def __init__(self, config: ModelConfig):
        self.config = config

    def generate_text(self, prompt: str) -> tuple:
        """
        Send a single user prompt
        Returns: (text, error_message)
        """
        logger.debug(f"Calling {self.config.provider} model {self.config.model} ({len(prompt)} chars)")

        if self.config.provider == 'openai':
            messages = [{"role": "user", "content": prompt}]
            return call_openai_api(messages, self.config)

        contents = [{"role": "user", "parts": [{"text": prompt}]}]
        result, error = call_gemini_api(contents, self.config)
        if error:
            return None, error
        return gemini_text(result), None

    def generate_image(self, prompt: str) -> tuple:
        """
        Ask the image model for a picture
        Returns: ((base64_data, mime_type) or None, error_message)
        """
        if self.config.provider != 'gemini':
            return None, f"Image generation is not supported for provider '{self.config.provider}'"

        logger.debug(f"Calling gemini image model {self.config.image_model}")

        contents = [{"role": "user", "parts": [{"text": prompt}]}]
        result, error = call_gemini_api(
            contents,
            self.config,
            model=self.config.image_model,
            generation_config={"responseModalities": ["TEXT", "IMAGE"]}
        )
        if error:
            return None, error
        return gemini_inline_image(result), None
