"""Achievify: personal-productivity API."""
