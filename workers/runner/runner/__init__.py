"""Command-line runner for notion2anki."""
