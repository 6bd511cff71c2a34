"""Summary Tester: fetch news articles, clean them and summarize them with LLMs."""

__version__ = "0.3.0"
