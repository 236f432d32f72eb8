"""Presentation layer: functional API and pytest plugin."""
