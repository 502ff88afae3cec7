"""Building blocks for HTTP clients: value types, options, callbacks, parsing helpers, a thread pool and a singleton base."""

__version__ = "0.1.0"
__all__ = ["types", "options", "callbacks", "util", "threadpool", "singleton"]