"""Infrastructure helpers: command-line parsing, callback logging, files, strings, timing, RGBA images, IP addresses, TCP sockets, system and process utilities."""

__version__ = "0.1.0"