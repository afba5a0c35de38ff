"""Constants shared across issuewarden modules."""
