"""Utility helpers for KV-Dictionary."""
