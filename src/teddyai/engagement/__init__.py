"""Proactive engagement for silent users."""

from .monitor import DEFAULT_IDLE_WINDOW, EngagementMonitor

__all__ = ["DEFAULT_IDLE_WINDOW", "EngagementMonitor"]
