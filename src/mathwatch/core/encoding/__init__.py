"""Encoders for log entries."""
