"""Two-stack sorting puzzle solver that reports the stack operations it uses."""

__version__ = "0.1.0"