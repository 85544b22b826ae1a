"""
CLI Module - Terminal Interaction
=================================
Prompt layer used by the session controller.
"""

from .prompts import Prompter, ClickPrompter

__all__ = ["Prompter", "ClickPrompter"]
