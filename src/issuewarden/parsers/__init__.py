"""Decoders for inbound webhook payloads."""

from .event import load_event, parse_event

__all__ = ["load_event", "parse_event"]
