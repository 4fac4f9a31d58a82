"""Status monitor that reports system information to the X root window or stdout."""

__version__ = "1.1"