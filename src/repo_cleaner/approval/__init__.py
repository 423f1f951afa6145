"""Approval prompts for branch deletion."""

from repo_cleaner.approval.prompter import ApprovalPrompter, ConsoleApprovalPrompter

__all__ = [
    "ApprovalPrompter",
    "ConsoleApprovalPrompter",
]
