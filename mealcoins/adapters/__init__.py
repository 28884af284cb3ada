"""Adapters exposing the use cases to the outside world."""

__all__: list[str] = []
