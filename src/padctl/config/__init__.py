"""Configuration — padctl.toml discovery, settings, and logging setup."""
