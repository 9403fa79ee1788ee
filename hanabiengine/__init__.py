"""Hanabi rules engine."""
