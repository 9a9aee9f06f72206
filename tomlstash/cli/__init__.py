"""Command line interface for TomlStash."""
