from typing import Dict, Any, Optional
import json
import re
import openai
from formsmith.core.config import settings
from formsmith.core.exceptions import FormGenerationError
from formsmith.models.form import FieldType
from formsmith.schemas.form import MAX_FIELDS_PER_SECTION, MAX_SECTIONS
import logging

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = f"""You are a form builder assistant. Generate a form structure based on the user's prompt. Return ONLY valid JSON in this exact format:
{{
  "title": "Form Title",
  "description": "Form Description",
  "sections": [
    {{
      "title": "Section Title",
      "fields": [
        {{
          "label": "Field Label",
          "type": "text|number",
          "required": true|false
        }}
      ]
    }}
  ]
}}

Rules:
- Maximum {MAX_SECTIONS} sections
- Maximum {MAX_FIELDS_PER_SECTION} fields per section
- Field types must be either "text" or "number" (lowercase)
- Make fields required based on their importance
- Create practical, relevant field labels"""

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def _field_type(value: Any) -> FieldType:
    if isinstance(value, str) and value.strip().upper() == FieldType.NUMBER.value:
        return FieldType.NUMBER
    return FieldType.TEXT


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def shape_generated_form(data: Any) -> Dict[str, Any]:
    """Fit model output into the builder's form shape.

    Keeps at most MAX_SECTIONS sections and MAX_FIELDS_PER_SECTION fields per
    section whatever the model returned, and maps "text"/"number" onto the
    internal field types.
    """
    if not isinstance(data, dict) or not isinstance(data.get("sections"), list):
        raise FormGenerationError("Invalid form structure from OpenAI")

    sections = []
    for raw_section in data["sections"][:MAX_SECTIONS]:
        if not isinstance(raw_section, dict):
            raw_section = {}
        raw_fields = raw_section.get("fields")
        if not isinstance(raw_fields, list):
            raw_fields = []

        fields = []
        for raw_field in raw_fields[:MAX_FIELDS_PER_SECTION]:
            if not isinstance(raw_field, dict):
                raw_field = {}
            fields.append({
                "label": _text(raw_field.get("label")),
                "type": _field_type(raw_field.get("type")),
                "required": _flag(raw_field.get("required", False)),
                "order": len(fields),
            })

        sections.append({
            "title": _text(raw_section.get("title")),
            "order": len(sections),
            "fields": fields,
        })

    return {
        "title": _text(data.get("title")),
        "description": _text(data.get("description")),
        "sections": sections,
    }


def parse_completion(content: Optional[str]) -> Any:
    if not content or not content.strip():
        raise FormGenerationError("No content received from OpenAI")

    text = content.strip()
    fenced = _CODE_FENCE.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise FormGenerationError("Invalid JSON response from OpenAI") from e


class ChatGPTService:
    def __init__(self, client: Optional[openai.OpenAI] = None):
        self._client = client
        logger.info("ChatGPT Service initialized")

    @property
    def client(self) -> openai.OpenAI:
        if self._client is None:
            if not settings.OPENAI_API_KEY:
                raise FormGenerationError("OpenAI API key not configured")
            self._client = openai.OpenAI(api_key=settings.OPENAI_API_KEY)
        return self._client

    def generate_form(self, prompt: str) -> Dict[str, Any]:
        """Turn a free-text description into a shaped form. Single attempt, no retry."""
        try:
            response = self.client.chat.completions.create(
                model=settings.OPENAI_MODEL,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=settings.OPENAI_TEMPERATURE,
                max_tokens=settings.OPENAI_MAX_TOKENS,
            )
        except openai.OpenAIError as e:
            logger.error(f"OpenAI request failed: {str(e)}")
            raise FormGenerationError(f"OpenAI API error: {str(e)}") from e

        content = response.choices[0].message.content if response.choices else None
        shaped = shape_generated_form(parse_completion(content))

        logger.info(f"Generated form with {len(shaped['sections'])} section(s)")
        return shaped
