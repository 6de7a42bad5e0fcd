# ai/gemini.py
# ------------------------------------------------------------------------------
import json
import logging
import re
import textwrap
from typing import Any, Dict, List

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from core.config import Settings
from core.errors import SourceFailure
from core.models import Itinerary, TripRequest

logger = logging.getLogger(__name__)

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)

# transport problems surface either as google API errors or as socket-level errors
_PROVIDER_ERRORS = (google_exceptions.GoogleAPIError, OSError)

# ──────────────────────────────────────────────────────────────────────────────
# Prompt template – a new itinerary as strict JSON
# ──────────────────────────────────────────────────────────────────────────────
_PROMPT_TEMPLATE = textwrap.dedent(
    """\
    Generate a detailed {days}-day travel itinerary for {city} focusing on {interests}.
    Return a valid JSON object with this exact structure:
    {{
      "days": [
        {{
          "day": 1,
          "activities": ["morning activity", "afternoon activity", "evening activity"]
        }},
        {{
          "day": 2,
          "activities": ["morning activity", "afternoon activity", "evening activity"]
        }}
      ],
      "tips": ["tip1", "tip2", "tip3", "tip4"],
      "packing": ["item1", "item2", "item3", "item4", "item5"]
    }}
    Make the itinerary realistic, practical and tailored to the interests. Return exactly {days} days.
    """
)


def build_prompt(req: TripRequest) -> str:
    """Return the prompt string for Gemini."""
    return _PROMPT_TEMPLATE.format(city=req.city, interests=req.interests, days=req.days)


def strip_code_fences(text: str) -> str:
    return _FENCE.sub("", text).strip()


def parse_itinerary(text: str, expected_days: int) -> Itinerary:
    """Parse the model's text answer; raises ValueError if it is not a usable itinerary."""
    return Itinerary.from_payload(json.loads(strip_code_fences(text)), expected_days)


def _model_id(name: str) -> str:
    return name.split("/")[-1]


class GeminiSource:
    """Primary itinerary source backed by the Gemini API."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _configure(self) -> None:
        genai.configure(api_key=self.settings.gemini_api_key)

    def _list_models(self) -> List[Any]:
        self._configure()
        models = genai.list_models(request_options={"timeout": self.settings.models_timeout})
        return [
            m for m in models
            if "generateContent" in (getattr(m, "supported_generation_methods", None) or [])
        ]

    def available_models(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": m.name,
                "display_name": getattr(m, "display_name", ""),
                "description": getattr(m, "description", ""),
                "supported_methods": list(m.supported_generation_methods),
            }
            for m in self._list_models()
        ]

    def _generate_text(self, prompt: str) -> str:
        model = genai.GenerativeModel(self.settings.gemini_model)
        resp = model.generate_content(
            prompt, request_options={"timeout": self.settings.generate_timeout}
        )
        text = resp.candidates[0].content.parts[0].text
        if not text or not text.strip():
            raise ValueError("empty response text")
        return text

    def generate(self, req: TripRequest) -> Itinerary:
        """
        List models, ask the configured one for a plan and validate it.
        Any failure along the way is raised as SourceFailure.
        """
        wanted = self.settings.gemini_model
        try:
            available = [_model_id(m.name) for m in self._list_models()]
        except _PROVIDER_ERRORS as e:
            logger.warning("Gemini model listing failed: %s", e)
            raise SourceFailure("could not list Gemini models", cause=e) from e

        logger.debug("Available models: %s", available)
        if wanted not in available:
            logger.warning("Model %s is not available (found %d models)", wanted, len(available))
            raise SourceFailure(f"model {wanted} is not available")

        try:
            text = self._generate_text(build_prompt(req))
        except _PROVIDER_ERRORS as e:
            logger.warning("Gemini API error (%s): %s", getattr(e, "code", None), e)
            raise SourceFailure("Gemini generation failed", cause=e) from e
        except (IndexError, AttributeError, ValueError) as e:
            logger.warning("Gemini returned no usable text: %s", e)
            raise SourceFailure("Gemini returned no text", cause=e) from e

        try:
            itinerary = parse_itinerary(text, req.days)
        except ValueError as e:
            logger.warning("Failed to parse itinerary from Gemini: %s", e)
            raise SourceFailure("invalid itinerary from Gemini", cause=e) from e

        logger.info("Generated %d-day plan for %s with %s", req.days, req.city, wanted)
        return itinerary
