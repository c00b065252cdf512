"""Scheduling, result application and standings."""
