"""
Configuration - .env file and environment variables
Everything the model client needs is resolved once into a ModelConfig.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


DEFAULT_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"

PROVIDERS = ("gemini", "openai")

DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}

API_KEY_VARS = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}

MODEL_VARS = {
    "gemini": "GEMINI_MODEL",
    "openai": "OPENAI_MODEL",
}


@dataclass(frozen=True)
class ModelConfig:
    """Provider settings handed to ModelClient at construction time"""
    provider: str = "gemini"
    api_key: str = ""
    model: str = DEFAULT_MODELS["gemini"]
    image_model: str = "gemini-2.5-flash-image"
    temperature: float = 0.7
    timeout: int = 30
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    openai_base_url: str = "https://api.openai.com/v1"
    debug: bool = False


def load_env_file(env_path=None):
    """Load environment variables from .env file"""
    env_path = Path(env_path) if env_path else DEFAULT_ENV_PATH
    env_vars = {}

    if env_path.exists():
        with open(env_path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and '=' in line:
                    key, value = line.split('=', 1)
                    env_vars[key.strip()] = value.strip().strip('"').strip("'")

    return env_vars


def get_str(env: Mapping[str, str], name: str, default: str = "") -> str:
    value = env.get(name)
    return value if value else default


def get_int(env: Mapping[str, str], name: str, default: int = 0) -> int:
    try:
        return int(env[name])
    except (KeyError, ValueError):
        return default


def get_float(env: Mapping[str, str], name: str, default: float = 0.0) -> float:
    try:
        return float(env[name])
    except (KeyError, ValueError):
        return default


def get_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    """'1', 'true' and 'yes' (any case) are true"""
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes")


def merged_environment(env_path=None, environ: Optional[Mapping[str, str]] = None) -> dict:
    """.env values overlaid by the process environment"""
    env = load_env_file(env_path)
    env.update(os.environ if environ is None else environ)
    return env


def load_config(env_path=None, environ: Optional[Mapping[str, str]] = None) -> ModelConfig:
    """Build a ModelConfig from .env and the process environment"""
    env = merged_environment(env_path, environ)

    provider = get_str(env, "SNIPPETMIND_PROVIDER", "gemini").lower()
    if provider not in PROVIDERS:
        raise ValueError(f"Unknown provider '{provider}', expected one of: {', '.join(PROVIDERS)}")

    defaults = ModelConfig()
    return ModelConfig(
        provider=provider,
        api_key=get_str(env, API_KEY_VARS[provider]),
        model=get_str(env, MODEL_VARS[provider], DEFAULT_MODELS[provider]),
        image_model=get_str(env, "GEMINI_IMAGE_MODEL", defaults.image_model),
        temperature=get_float(env, "MODEL_TEMPERATURE", defaults.temperature),
        timeout=get_int(env, "MODEL_TIMEOUT", defaults.timeout),
        gemini_base_url=get_str(env, "GEMINI_BASE_URL", defaults.gemini_base_url).rstrip('/'),
        openai_base_url=get_str(env, "OPENAI_BASE_URL", defaults.openai_base_url).rstrip('/'),
        debug=get_bool(env, "SNIPPETMIND_DEBUG", defaults.debug),
    )
