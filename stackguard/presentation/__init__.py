"""Presentation layer: transport adapters over the authorization core."""
