import logging
from typing import Optional

import requests
from openai import OpenAI

from career_api import config

logger = logging.getLogger(__name__)

_openai_client: Optional[OpenAI] = None


class GenerationError(RuntimeError):
    """The text-generation service failed or returned nothing usable."""


def get_openai_client() -> OpenAI:
    global _openai_client
    if _openai_client is None:
        if not config.OPENAI_API_KEY:
            logger.warning("OPENAI_API_KEY is missing. Generation requests will fail.")
        _openai_client = OpenAI(api_key=config.OPENAI_API_KEY or None, timeout=config.LLM_TIMEOUT_SECONDS)
    return _openai_client


def openai_chat(system: str, user: str, model: str, temperature: float, max_tokens: int) -> str:
    try:
        completion = get_openai_client().chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
    except Exception as e:
        raise GenerationError(f"OpenAI error: {e}") from e

    if not completion.choices:
        raise GenerationError("OpenAI returned no choices")
    content = completion.choices[0].message.content
    if not content:
        raise GenerationError("OpenAI returned an empty message")
    return content


def ollama_chat(system: str, user: str, temperature: float = 0.0, max_tokens: Optional[int] = None) -> str:
    options = {"temperature": temperature}
    if max_tokens:
        options["num_predict"] = max_tokens

    payload = {
        "model": config.OLLAMA_MODEL,
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        "options": options,
        "stream": False,
    }

    try:
        r = requests.post(config.OLLAMA_URL, json=payload, timeout=config.LLM_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        raise GenerationError(f"Ollama unreachable: {e}") from e
    if r.status_code != 200:
        raise GenerationError(f"Ollama error: {r.text}")

    return r.json()["message"]["content"]


def chat(system: str, user: str, model: str, temperature: float, max_tokens: int) -> str:
    """Single system+user exchange with the configured provider.

    ``model`` is only honoured by the OpenAI provider; Ollama always uses
    ``OLLAMA_MODEL``.
    """
    if config.LLM_PROVIDER == "ollama":
        return ollama_chat(system, user, temperature=temperature, max_tokens=max_tokens)
    return openai_chat(system, user, model=model, temperature=temperature, max_tokens=max_tokens)
