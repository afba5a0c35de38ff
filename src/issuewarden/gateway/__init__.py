"""Collaborators the triage pipeline talks to: the issue tracker and the web."""
