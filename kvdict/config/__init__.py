"""Configuration module for KV-Dictionary."""
