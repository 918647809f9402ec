"""tkit: a personal task-tracking command interpreter with flat-file persistence."""

__version__ = "0.1.0"
