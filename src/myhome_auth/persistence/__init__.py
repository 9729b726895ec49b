"""Persistence implementations for myhome_auth repositories."""
