"""
Extraction pipeline shared by every text endpoint.

Endpoints differ only in their PipelineOptions:
- prompt template
- what Text defaults to when the model gives none
- whether the model or the heuristics get the first word on Code
- how extracted code is styled on the way out
"""

from dataclasses import dataclass
from typing import Optional

from .errors import MissingArtifactError, UpstreamError
from .log import logger
from .normalizer import ExtractionResult, normalize_response
from .prompts import (
    EXTRACT_ONLY_TEMPLATE,
    EXTRACTION_TEMPLATE,
    GENERATE_TEMPLATE,
    build_extraction_prompt,
)
from .utils.extractors import run_heuristics, strip_comment_style, wrap_code_as_comment_style

MODEL_FIRST = "model_first"
HEURISTIC_FIRST = "heuristic_first"

CODE_STYLES = {
    "wrap": wrap_code_as_comment_style,
    "strip": strip_comment_style,
    "raw": lambda code: code,
}


@dataclass(frozen=True)
class PipelineOptions:
    template: str = EXTRACTION_TEMPLATE
    # None: Text falls back to the caller's input
    default_text: Optional[str] = None
    order: str = MODEL_FIRST
    # heuristic_first only: skip the model when the input already carries code
    short_circuit: bool = False
    code_style: str = "wrap"

    def __post_init__(self):
        if self.order not in (MODEL_FIRST, HEURISTIC_FIRST):
            raise ValueError(f"Unknown order: {self.order}")
        if self.code_style not in CODE_STYLES:
            raise ValueError(f"Unknown code style: {self.code_style}")


VARIANTS = {
    "bot": PipelineOptions(),
    "extract": PipelineOptions(
        template=EXTRACT_ONLY_TEMPLATE,
        order=HEURISTIC_FIRST,
        code_style="raw",
    ),
    "snippet": PipelineOptions(
        template=EXTRACT_ONLY_TEMPLATE,
        order=HEURISTIC_FIRST,
        short_circuit=True,
    ),
    "generate": PipelineOptions(
        template=GENERATE_TEMPLATE,
        default_text="No explanation provided.",
        code_style="strip",
    ),
}


class ExtractionPipeline:
    """prompt -> model -> normalize -> heuristics -> code style"""

    def __init__(self, client, options: PipelineOptions = PipelineOptions()):
        self.client = client
        self.options = options

    def call_model(self, text):
        prompt = build_extraction_prompt(text, self.options.template)
        output, error = self.client.generate_text(prompt)
        if error:
            logger.error(f"Model call failed: {error}")
            raise UpstreamError(error)
        return output

    def run(self, text: str) -> ExtractionResult:
        options = self.options

        if options.order == HEURISTIC_FIRST:
            found = run_heuristics(text)
            if found['Code'] and options.short_circuit:
                logger.debug("Input already carries code, skipping the model")
                result = normalize_response("", text, options.default_text)
            else:
                result = normalize_response(self.call_model(text), text, options.default_text)

            # heuristics win over whatever the model said about the code
            if found['Code']:
                result.Code = found['Code']
                result.Language = found['Language']
        else:
            result = normalize_response(self.call_model(text), text, options.default_text)

        if result.Code:
            result.Code = CODE_STYLES[options.code_style](result.Code)

        return result


class ImagePipeline:
    """Prompt in, data URL out"""

    def __init__(self, client):
        self.client = client

    def run(self, prompt: str) -> str:
        image, error = self.client.generate_image(prompt)
        if error:
            logger.error(f"Image generation failed: {error}")
            raise UpstreamError(error)
        if not image:
            logger.warning("Model returned no inline image")
            raise MissingArtifactError()

        data, mime = image
        return f"data:{mime or 'image/png'};base64,{data}"
