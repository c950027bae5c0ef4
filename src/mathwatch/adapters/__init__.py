"""Adapters bridging the core to files, memory and stdlib logging."""
