"""Adapters - I/O implementations of ports."""

from .supabase_rest import SupabaseAdapter, SupabaseError
from .file_completions import FileCompletionStore

__all__ = [
    "SupabaseAdapter",
    "SupabaseError",
    "FileCompletionStore",
]
