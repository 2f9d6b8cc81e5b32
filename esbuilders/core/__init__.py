"""Core builder framework, errors and configuration."""
