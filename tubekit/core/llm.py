"""
Construction of the text-generation backend.
"""

from typing import Optional

from langchain.chat_models import init_chat_model
from langchain_core.language_models.chat_models import BaseChatModel

from tubekit.config import config
from tubekit.utils.error_handling import UpstreamServiceError
from tubekit.utils.logger import logging


def build_chat_model(
    model: str,
    temperature: float,
    max_tokens: int,
    api_key: Optional[str] = None,
    provider: Optional[str] = None,
) -> BaseChatModel:
    """
    Build a chat model for the configured provider.

    Args:
        model: Model name
        temperature: Sampling temperature
        max_tokens: Maximum tokens in the reply
        api_key: Groq API key (if None, taken from config)
        provider: LangChain model provider (if None, taken from config)

    Returns:
        A LangChain chat model
    """
    api_key = api_key or config.GROQ_API_KEY
    if not api_key:
        raise UpstreamServiceError("Groq API key is required. Set GROQ_API_KEY in the .env file or environment.")

    provider = provider or config.LLM_PROVIDER
    logging.debug(f"Building chat model {model} ({provider}) temperature={temperature} max_tokens={max_tokens}")
    return init_chat_model(
        model=model,
        model_provider=provider,
        temperature=temperature,
        max_tokens=max_tokens,
        api_key=api_key,
    )


def response_text(response) -> str:
    """Return the text content of a chat model reply, or an empty string."""
    content = getattr(response, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        # Content blocks: keep the text parts only.
        return "".join(
            block if isinstance(block, str) else block.get("text", "")
            for block in content
            if isinstance(block, (str, dict))
        )
    return ""
