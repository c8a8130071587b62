"""Steer-or-queue delivery of chat messages to a busy agent."""

__version__ = "0.1.0"
