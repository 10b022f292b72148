"""Line-oriented text editor driven by a command stream."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "config",
    "errors",
    "modes",
    "runtime",
    "session",
]

__version__ = "0.1.0"
