"""Daylight calendar and city gazetteer service."""
