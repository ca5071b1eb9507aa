"""Tavus Conversational Video Interface boundary."""

from learning_check.boundary.tavus.tavus_client import TavusClient

__all__ = ["TavusClient"]
