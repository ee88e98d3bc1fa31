"""Adapters: concrete I/O (HTTP API, local store) behind the core interfaces."""
