"""LLM summarization package."""

from summary_tester.llm.summarizer import Summary, SummarizationError, summarize

__all__ = ["summarize", "Summary", "SummarizationError"]
