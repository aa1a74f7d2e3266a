"""Pydantic models for the Message API."""
