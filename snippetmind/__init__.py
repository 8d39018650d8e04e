"""
SnippetMind - turns free text into {Code, Language, Text, ImageUrl} with a generative model
"""

__version__ = "0.1.0"

from .config import ModelConfig, load_config
from .model_interface import ModelClient
from .normalizer import ExtractionResult, normalize_response
from .pipeline import VARIANTS, ExtractionPipeline, ImagePipeline, PipelineOptions

__all__ = [
    'ExtractionPipeline',
    'ExtractionResult',
    'ImagePipeline',
    'ModelClient',
    'ModelConfig',
    'PipelineOptions',
    'VARIANTS',
    'load_config',
    'normalize_response',
]
