"""File and in-memory storage: prompts, feedback log and the job relay."""

from summary_tester.store.feedback import FeedbackEntry, append_feedback, load_feedback
from summary_tester.store.jobs import JobQueue
from summary_tester.store.prompts import list_prompts, save_prompt

__all__ = [
    "FeedbackEntry",
    "JobQueue",
    "append_feedback",
    "list_prompts",
    "load_feedback",
    "save_prompt",
]
