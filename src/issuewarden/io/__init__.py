"""File helpers for issuewarden."""

from .json_io import load_json_object, write_json_atomic
from .templates import read_comment_template

__all__ = ["load_json_object", "read_comment_template", "write_json_atomic"]
