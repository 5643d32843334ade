"""Adapters for third-party query builders."""
