"""Pydantic models for the PrintFlow HTTP API."""
