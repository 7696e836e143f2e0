# filename: openai_service.py
# location: portfolio/services/

import logging

from openai import OpenAI, RateLimitError

logger = logging.getLogger(__name__)

QUOTA_ERROR_CODES = {"insufficient_quota", "rate_limit_exceeded"}

EMPTY_COMPLETION_TEXT = "I apologize, but I could not generate a response. Please try again."


def is_quota_error(error) -> bool:
    """True for rate limit / exhausted quota failures from the OpenAI API."""
    if isinstance(error, RateLimitError):
        return True
    if getattr(error, "status_code", None) == 429 or getattr(error, "status", None) == 429:
        return True
    return getattr(error, "code", None) in QUOTA_ERROR_CODES


class OpenAIChatClient:
    """Lazily built wrapper around ``client.chat.completions.create``."""

    def __init__(self, api_key=None, model="gpt-3.5-turbo", temperature=0.7, max_tokens=300):
        self.api_key = api_key.strip() if api_key else None
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = None

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self):
        """OpenAI client, created on first use; None when no key is set."""
        if self._client is None and self.api_key:
            try:
                self._client = OpenAI(api_key=self.api_key)
                logger.info("✅ OpenAI client initialized successfully")
            except Exception as e:
                logger.error(f"❌ Failed to initialize OpenAI client: {e}")
                self._client = None
        return self._client

    def complete(self, messages) -> str:
        completion = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        content = completion.choices[0].message.content if completion.choices else None
        return content.strip() if content and content.strip() else EMPTY_COMPLETION_TEXT
