"""
Generative data source: turns free text about a person into a validated self map via
an OpenAI chat completion constrained to JSON output.
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Dict, Optional

from openai import OpenAI

from .errors import GenerationError, SelfMapValidationError
from .models import SelfMapData
from .validation import LENIENT, parse_document

logger = logging.getLogger(__name__)

DEFAULT_LLM_MODEL = "gpt-4o-mini"

SELF_MAP_SYSTEM_PROMPT = """You generate "Self Map" datasets. A Self Map represents the key components of a
person's identity as entries connected by associations.

Return STRICT JSON with exactly this shape:
{
  "entries": [
    {
      "label": "short descriptive name, unique across entries",
      "category": "People|Accomplishments|Life Story|Ideas/Likes|Other",
      "power": 0.0-1.0,
      "valence": -1.0-1.0
    }
  ],
  "associations": [
    {
      "src": "label of the source entry",
      "dst": "label of the destination entry",
      "relation": "affirms|threatens|associates_with",
      "weight": 0.0-1.0
    }
  ]
}

Field meaning:
- power: how central the entry is to the person's identity. 1.0 is most central.
- valence: emotional charge. -1.0 very negative, 0 neutral, 1.0 very positive.
- relation: "affirms" when one supports or strengthens the other, "threatens" when one undermines or
  conflicts with the other, "associates_with" for a neutral connection.
- weight: strength of the association. 1.0 is strongest.

Generate at least 10 entries and 5 associations. Every src and dst must exactly match a label in entries.
"""


class SelfMapGenerator:
    """
    Single-shot text -> SelfMapData call. No retries; any failure raises GenerationError.
    """

    def __init__(
        self,
        llm_client: Optional[Any] = None,
        llm_model: Optional[str] = None,
        dangling_policy: str = LENIENT,
    ) -> None:
        self.llm_client = llm_client
        self.llm_model = llm_model or os.getenv("SELF_MAP_LLM_MODEL", DEFAULT_LLM_MODEL)
        self.dangling_policy = dangling_policy

        if self.llm_client is None:
            api_key = os.getenv("OPENAI_API_KEY")
            try:
                if not api_key:
                    raise ValueError("OPENAI_API_KEY environment variable not set")
                self.llm_client = OpenAI(api_key=api_key)
            except Exception as exc:
                logger.warning("Failed to initialize OpenAI client (%s); generation is disabled.", exc)

    @property
    def llm_enabled(self) -> bool:
        return self.llm_client is not None

    def generate(self, text: str) -> SelfMapData:
        """
        Generate a self map from free text.

        Inputs:
            text: User-provided description of themselves.

        Outputs:
            Validated SelfMapData.

        Raises:
            GenerationError: Empty prompt, disabled client, API failure or invalid output.
        """

        if not text or not text.strip():
            raise GenerationError("Please describe yourself before generating a self map.")
        if not self.llm_enabled:
            raise GenerationError("OPENAI_API_KEY is not configured; cannot generate a self map.")

        try:
            raw = self._chat_json(SELF_MAP_SYSTEM_PROMPT, f"USER TEXT:\n---\n{text.strip()}\n---")
            return parse_document(raw, dangling_policy=self.dangling_policy)
        except SelfMapValidationError as exc:
            logger.error("Generated self map failed validation: %s", exc)
            raise GenerationError(f"Invalid data structure received from the AI: {exc}") from exc
        except Exception as exc:
            logger.error("Error generating self map data: %s", exc)
            raise GenerationError("Failed to generate data from the AI.") from exc

    def _chat_json(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        response = self.llm_client.chat.completions.create(
            model=self.llm_model,
            temperature=0,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        return _coerce_json(response.choices[0].message.content)


def _coerce_json(raw: str) -> Dict[str, Any]:
    """
    Parse JSON from an LLM response, stripping markdown code fences.

    Falls back to the outermost {...} span when the model wraps the object in prose.
    Raises json.JSONDecodeError when nothing parses.
    """

    raw = (raw or "").strip()
    fenced = re.match(r"^```(?:json)?\s*\n(.*?)\n```\s*$", raw, re.DOTALL | re.IGNORECASE)
    if fenced:
        raw = fenced.group(1)

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        start = raw.find("{")
        end = raw.rfind("}")
        if start != -1 and end > start:
            return json.loads(raw[start : end + 1])
        raise
