"""Small shared helpers."""

from .naming import sanitize_folder_name

__all__ = ["sanitize_folder_name"]
