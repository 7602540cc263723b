"""Adapters — relay delivery, scoped HTTP, script loading, web surface."""
