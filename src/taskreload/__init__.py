"""taskreload - client for the TaskReload task list API."""

__version__ = "0.1.0"
