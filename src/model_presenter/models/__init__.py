"""Pydantic models describing data consumed from presentable sources."""
