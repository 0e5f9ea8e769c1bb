"""
Module for generating YouTube SEO suggestions using LLM models.
"""

import json
import re
from typing import List, Optional, Union

from langchain_core.language_models.chat_models import BaseChatModel
from pydantic import ValidationError

from tubekit.core.llm import build_chat_model, response_text
from tubekit.core.prompts import seo_prompt
from tubekit.models.schemas import SeoConfig, SeoSuggestionBundle
from tubekit.utils.error_handling import InvalidInputError, SuggestionFormatError, UpstreamServiceError
from tubekit.utils.helpers import truncate_text
from tubekit.utils.logger import logging

_CODE_FENCE_RE = re.compile(r"```json\n?|\n?```")


def strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers around a JSON reply."""
    return _CODE_FENCE_RE.sub("", text).strip()


def format_tags(tags: Union[str, List[str], None]) -> str:
    if tags is None:
        return ""
    if isinstance(tags, str):
        return tags
    return ", ".join(str(tag) for tag in tags)


def parse_suggestions(text: str) -> SeoSuggestionBundle:
    """
    Parse and validate the JSON suggestions returned by the model.

    Descriptions are asked for with escaped ``\\n`` sequences so the JSON
    stays valid; those are turned back into line breaks here.

    Args:
        text: Raw model reply

    Returns:
        SeoSuggestionBundle with all four lists non-empty
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logging.error(f"Failed to parse AI response: {truncate_text(cleaned, 500)}")
        raise SuggestionFormatError("Failed to parse suggestions") from e

    if not isinstance(data, dict):
        raise SuggestionFormatError("Invalid suggestion format received")

    try:
        bundle = SeoSuggestionBundle.model_validate(data)
    except ValidationError as e:
        logging.error(f"Suggestion validation failed: {e.error_count()} errors")
        raise SuggestionFormatError("Invalid suggestion format received") from e

    bundle.description = [desc.replace("\\n", "\n") for desc in bundle.description]
    return bundle


class SeoEnhancer:
    """Class to request SEO suggestions for video metadata."""

    def __init__(self, llm: BaseChatModel, config: Optional[SeoConfig] = None):
        """
        Initialize the enhancer with a chat model.

        Args:
            llm: Chat model used to generate suggestions
            config: Configuration the model was built with
        """
        self.llm = llm
        self.config = config or SeoConfig()

    @classmethod
    def from_config(cls, config: Optional[SeoConfig] = None) -> "SeoEnhancer":
        """Build an enhancer backed by the configured chat model."""
        config = config or SeoConfig()
        llm = build_chat_model(config.model, config.temperature, config.max_tokens)
        return cls(llm, config)

    def _request(self, messages) -> str:
        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            logging.error(f"SEO request failed: {str(e)}")
            raise UpstreamServiceError(str(e) or "Failed to generate SEO suggestions") from e

        content = response_text(response)
        if not content.strip():
            raise UpstreamServiceError("Failed to generate suggestions")
        return content

    def enhance(
        self,
        title: str,
        description: str,
        tags: Union[str, List[str], None] = None,
    ) -> SeoSuggestionBundle:
        """
        Request SEO suggestions for a video.

        Args:
            title: Current video title
            description: Current video description
            tags: Current tags, as a string or a list

        Returns:
            Validated SeoSuggestionBundle
        """
        if not title or not description:
            raise InvalidInputError("Title and description are required")

        messages = seo_prompt.format_messages(
            title=title,
            description=description,
            tags=format_tags(tags),
        )

        attempt = 1
        while True:
            logging.info(f"Requesting SEO suggestions from {self.config.model} (attempt {attempt})")
            content = self._request(messages)
            try:
                return parse_suggestions(content)
            except SuggestionFormatError as e:
                if attempt >= self.config.max_attempts:
                    raise
                logging.warning(f"Discarding malformed suggestions ({e.message}), retrying")
                attempt += 1
