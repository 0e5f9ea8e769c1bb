"""
Module for summarizing transcripts using LLM models.
"""

from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel

from tubekit.core.llm import build_chat_model, response_text
from tubekit.core.prompts import summary_prompt
from tubekit.models.schemas import SummaryConfig
from tubekit.utils.error_handling import UpstreamServiceError
from tubekit.utils.logger import logging


def clean_summary_text(text: str) -> str:
    """Strip markdown emphasis markers the model emits despite instructions."""
    return text.replace("**", "").replace("*", "").strip()


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, llm: BaseChatModel, config: Optional[SummaryConfig] = None):
        """
        Initialize the summarizer with a chat model.

        Args:
            llm: Chat model used to generate the summary
            config: Configuration the model was built with
        """
        self.llm = llm
        self.config = config or SummaryConfig()

    @classmethod
    def from_config(cls, config: Optional[SummaryConfig] = None) -> "TranscriptSummarizer":
        """Build a summarizer backed by the configured chat model."""
        config = config or SummaryConfig()
        llm = build_chat_model(config.model, config.temperature, config.max_tokens)
        return cls(llm, config)

    def summarize(self, transcript_text: str) -> str:
        """
        Summarize a transcript text.

        Args:
            transcript_text: Full transcript text to summarize

        Returns:
            Summary as plain text
        """
        if not transcript_text or not transcript_text.strip():
            raise UpstreamServiceError("Transcript is empty, nothing to summarize")

        messages = summary_prompt.format_messages(text=transcript_text)
        logging.info(f"Requesting summary from {self.config.model} for {len(transcript_text)} characters")
        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            logging.error(f"Summary request failed: {str(e)}")
            raise UpstreamServiceError(str(e) or "Failed to summarize video") from e

        content = response_text(response)
        if not content.strip():
            raise UpstreamServiceError("Failed to generate summary")

        return clean_summary_text(content)
