"""postfeed - dependency-injected post fetching."""

__version__ = "0.1.0"
