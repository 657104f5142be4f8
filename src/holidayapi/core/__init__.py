"""Core: configuration, errors and domain models."""
