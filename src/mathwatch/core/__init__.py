"""Core domain: models, errors, operations and the logging pipeline."""
