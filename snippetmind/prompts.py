"""
Prompt templates for the extraction endpoints.
Each template has a single {input} slot; the raw text goes in verbatim
between delimiter lines. Nothing is escaped, so input can still steer the model.
"""

INPUT_START = "<<<INPUT"
INPUT_END = "INPUT>>>"

SCHEMA_BLOCK = """Respond with ONE JSON object using exactly this schema:

{
  "Code": string | null,
  "Language": string | null,
  "Text": string | null,
  "ImageUrl": string | null
}

- "Code": the extracted or generated code
- "Language": language name of the code (html, javascript, python, etc.)
- "Text": plain text explanation, if any
- "ImageUrl": an image URL if one is mentioned or produced"""

OUTPUT_RULES = """Rules:
- Output ONLY the JSON object. No markdown fences, no prose before or after it.
- If there is code, wrap the Code value like this: <!-- your code here -->
- Use null instead of empty strings."""

EXTRACTION_TEMPLATE = """You are an intelligent AI extraction and generation engine.

You will receive a user input that may:
- Contain code,
- Contain text,
- Include image URLs,
- Or be a request to *generate* something (like "build a website" or "create a scraping tool").

Your job:
1. Understand intent: decide whether to extract or generate.
2. If generating, write complete, working code for the request.
3. If code and text are mixed, separate them clearly.

{schema}

{rules}

{start}
{input}
{end}
"""

EXTRACT_ONLY_TEMPLATE = """You are a precise extraction engine. Do not invent content:
only report code, text and image URLs that are present in the input.

{schema}

{rules}

{start}
{input}
{end}
"""

GENERATE_TEMPLATE = """You are an expert developer. Write complete, working code
for the request below and a short explanation of what it does.

{schema}

{rules}

{start}
{input}
{end}
"""


def build_extraction_prompt(text: str, template: str = EXTRACTION_TEMPLATE) -> str:
    # str.replace keeps braces in user text from being read as format fields
    prompt = template.format(
        schema=SCHEMA_BLOCK,
        rules=OUTPUT_RULES,
        start=INPUT_START,
        end=INPUT_END,
        input="{input}",
    )
    return prompt.replace("{input}", text, 1)
