"""Meal coins: daily coin budgeting with trend statistics and forecasts."""

__version__ = "0.1.0"
