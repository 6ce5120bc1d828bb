from .api import WordProvider, CachedWordProvider, make_provider, parse_word_list
from .memory_provider import MemoryWordProvider
from .file_provider import FileWordProvider
from .http_provider import HttpWordProvider

__all__ = [
    "WordProvider", "CachedWordProvider", "make_provider", "parse_word_list",
    "MemoryWordProvider", "FileWordProvider", "HttpWordProvider",
]
