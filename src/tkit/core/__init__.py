"""Core: date handling, command parsing and the command engine."""
