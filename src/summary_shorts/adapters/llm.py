"""
LLM client with fallback support
Priority: OpenAI (chat completions) → Ollama (local)
All API keys come from config / environment.
"""

from typing import Dict, Optional

import ollama
import requests

from summary_shorts import config
from summary_shorts.errors import LLMError


class LLMClient:
    """Text-in, text-out completion with provider fallback."""

    def __init__(
        self,
        openai_api_key: Optional[str] = None,
        openai_model: Optional[str] = None,
        openai_base_url: Optional[str] = None,
        ollama_base_url: Optional[str] = None,
        ollama_model: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: float = 60,
        use_ollama: bool = True,
    ):
        self.openai_config = {
            "api_key": openai_api_key if openai_api_key is not None else config.OPENAI_API_KEY,
            "model": openai_model or config.OPENAI_MODEL,
            "base_url": (openai_base_url or config.OPENAI_BASE_URL).rstrip("/"),
        }
        self.ollama_config = {
            "base_url": ollama_base_url or config.OLLAMA_BASE_URL,
            "model": ollama_model or config.OLLAMA_MODEL,
        }
        self.temperature = temperature if temperature is not None else config.LLM_TEMPERATURE
        self.timeout = timeout
        self.use_ollama = use_ollama
        self.last_provider: Optional[str] = None

    def generate(self, prompt: str) -> str:
        """Return the completion text of the first provider that answers."""
        errors: Dict[str, str] = {}

        if (self.openai_config["api_key"] or "").strip():
            try:
                text = self._generate_openai(prompt)
                self.last_provider = "openai"
                return text
            except (requests.RequestException, LLMError) as e:
                print(f"  ⚠️  OpenAI error: {e}")
                errors["openai"] = str(e)

        if self.use_ollama:
            try:
                text = self._generate_ollama(prompt)
                self.last_provider = "ollama"
                return text
            except Exception as e:
                print(f"  ⚠️  Ollama error: {e}")
                errors["ollama"] = str(e)

        detail = "; ".join(f"{name}: {msg}" for name, msg in errors.items()) or "no provider configured"
        raise LLMError(f"All LLM providers failed ({detail})")

    def _generate_openai(self, prompt: str) -> str:
        url = f"{self.openai_config['base_url']}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.openai_config['api_key']}",
            "Content-Type": "application/json",
        }
        data = {
            "model": self.openai_config["model"],
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
        }
        response = requests.post(url, headers=headers, json=data, timeout=self.timeout)
        if response.status_code != 200:
            raise LLMError(f"HTTP {response.status_code}: {response.text[:200]}")
        try:
            result = response.json()
            return result["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise LLMError(f"Malformed OpenAI response: {e!r}") from e

    def _generate_ollama(self, prompt: str) -> str:
        client = ollama.Client(host=self.ollama_config["base_url"])
        response = client.generate(
            model=self.ollama_config["model"],
            prompt=prompt,
            options={"temperature": self.temperature},
        )
        return response["response"] or ""
