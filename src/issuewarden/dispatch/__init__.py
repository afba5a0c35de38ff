"""Execution of rule verdicts against the tracker and the web."""

from .dispatcher import Dispatcher

__all__ = ["Dispatcher"]
