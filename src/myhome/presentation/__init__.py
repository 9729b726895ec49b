"""Presentation layer for MyHome."""
