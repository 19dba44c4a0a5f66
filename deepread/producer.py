import logging

import openai
from openai import OpenAI

log = logging.getLogger(__name__)


class OpenAIProducer:
    """
    Chat-completions client for the daily page.

    generate() returns the model's text, or None when the API cannot be used:
    no key configured, transport failure or an error status. Callers treat
    None the same as an unusable document.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str,
        max_tokens: int = 6000,
        temperature: float = 0.2,
        client=None,
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = client

    @property
    def available(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self):
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def generate(self, system_prompt: str, user_prompt: str) -> str | None:
        if not self.available:
            log.warning("OPENAI_API_KEY is not set; skipping the API call")
            return None

        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as exc:
            log.error("OpenAI error: %s %s", exc.status_code, exc.message)
            return None
        except openai.OpenAIError as exc:
            log.error("OpenAI request failed: %s", exc)
            return None

        if not resp.choices:
            return ""
        content = resp.choices[0].message.content
        return (content or "").strip()


class OfflineProducer:
    """Never calls out; used for --offline runs."""

    available = False

    def generate(self, system_prompt: str, user_prompt: str) -> str | None:
        log.info("Offline run; not calling the API")
        return None
