"""Command-line diagnostics for confmigrate."""
