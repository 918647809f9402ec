"""Command handlers, bootstrap and the console entry point."""
