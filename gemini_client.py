"""Gemini access for slide generation.

``GeminiClient`` is the capability object the orchestrator asks before
generating: it is built once at process start, verified with a real call,
and keeps the resulting ``ApiKeyStatus`` until it is verified again.
"""

import logging
import time
from enum import Enum
from typing import Optional

from google import genai
from google.auth import default
from google.genai import errors, types

from config import Settings
from errors import UpstreamUnavailable

API_KEY_PREFIX = "AIza"
MIN_API_KEY_LENGTH = 30
PLACEHOLDER_API_KEY = "GEMINI_API_KEY"
MIN_RESPONSE_CHARS = 500
VERIFICATION_PROMPT = "Generate exactly 3 words about data mining"


class ApiKeyStatus(str, Enum):
    MISSING = "MISSING"
    INVALID = "INVALID"
    UNVERIFIED = "UNVERIFIED"
    VALID = "VALID"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    ERROR = "ERROR"


ERROR_CODE_STATUS = {
    403: ApiKeyStatus.PERMISSION_DENIED,
    429: ApiKeyStatus.QUOTA_EXCEEDED,
    503: ApiKeyStatus.SERVICE_UNAVAILABLE,
}


def looks_like_api_key(api_key: Optional[str]) -> bool:
    """Checks the shape of a Gemini API key without calling the service."""
    api_key = (api_key or "").strip()
    return (
        api_key != PLACEHOLDER_API_KEY
        and len(api_key) >= MIN_API_KEY_LENGTH
        and api_key.startswith(API_KEY_PREFIX)
    )


def status_from_error(error: Exception) -> ApiKeyStatus:
    code = getattr(error, "code", None)
    if code in ERROR_CODE_STATUS:
        return ERROR_CODE_STATUS[code]
    message = str(error)
    for code, status in ERROR_CODE_STATUS.items():
        if str(code) in message:
            return status
    return ApiKeyStatus.ERROR


class GeminiClient:
    def __init__(self, settings: Settings, genai_client=None):
        self.settings = settings
        self._client = genai_client
        self.status = ApiKeyStatus.UNVERIFIED

    @property
    def is_ready(self) -> bool:
        return self._client is not None and self.status == ApiKeyStatus.VALID

    def _build_client(self):
        http_options = types.HttpOptions(timeout=int(self.settings.request_timeout_seconds * 1000))
        if self.settings.use_vertexai:
            credentials, _ = default(scopes=["https://www.googleapis.com/auth/cloud-platform"])
            return genai.Client(
                vertexai=True,
                project=self.settings.google_cloud_project,
                location=self.settings.google_cloud_location,
                credentials=credentials,
                http_options=http_options,
            )
        return genai.Client(api_key=self.settings.gemini_api_key, http_options=http_options)

    def verify(self) -> bool:
        """Checks the credential and makes one small real generation call."""
        if not self.settings.use_vertexai:
            if not self.settings.gemini_api_key:
                logging.warning("GEMINI_API_KEY not found in environment variables")
                self.status = ApiKeyStatus.MISSING
                self._client = None
                return False
            if not looks_like_api_key(self.settings.gemini_api_key):
                logging.warning("GEMINI_API_KEY has an invalid format")
                self.status = ApiKeyStatus.INVALID
                self._client = None
                return False

        logging.info("Testing Gemini API connection...")
        try:
            client = self._client or self._build_client()
            response = client.models.generate_content(model=self.settings.gemini_model, contents=VERIFICATION_PROMPT)
            text = (response.text or "").strip()
            if not text:
                raise UpstreamUnavailable("Empty verification response")
        except Exception as e:
            self.status = status_from_error(e)
            self._client = None
            logging.error(f"Gemini API verification failed ({self.status.value}): {e}")
            return False

        self._client = client
        self.status = ApiKeyStatus.VALID
        logging.info(f"Gemini API verified successfully, test response: '{text}'")
        return True

    def generate(self, prompt: str) -> str:
        """Sends one prompt and returns the completion text.

        Raises UpstreamUnavailable for any failure, including responses too
        short to hold a deck.
        """
        if not self.is_ready:
            raise UpstreamUnavailable(f"Gemini API not available (status: {self.status.value})")

        config = types.GenerateContentConfig(
            temperature=self.settings.temperature,
            max_output_tokens=self.settings.max_output_tokens,
            top_p=self.settings.top_p,
        )

        logging.info(f"Sending prompt to Gemini ({len(prompt)} chars)")
        start = time.time()
        try:
            response = self._client.models.generate_content(
                model=self.settings.gemini_model,
                contents=prompt,
                config=config,
            )
            generated_text = response.text or ""
        except errors.APIError as e:
            raise UpstreamUnavailable(f"Gemini API error {e.code}: {e}") from e
        except Exception as e:
            raise UpstreamUnavailable(f"Gemini call failed: {e}") from e

        duration_ms = int((time.time() - start) * 1000)
        logging.info(f"Gemini responded in {duration_ms}ms with {len(generated_text)} characters")
        logging.debug(f"Received raw response from Gemini: {generated_text[:300]}")

        if len(generated_text) < MIN_RESPONSE_CHARS:
            raise UpstreamUnavailable(f"Gemini response too short ({len(generated_text)} chars)")
        return generated_text
