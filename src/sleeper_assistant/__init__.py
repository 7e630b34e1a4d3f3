"""Sleeper Assistant - fantasy football tools for Sleeper leagues."""

__version__ = "0.1.0"
