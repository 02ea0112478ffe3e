"""TubeVote - session-based video recommendation and voting service."""

__version__ = "0.1.0"
