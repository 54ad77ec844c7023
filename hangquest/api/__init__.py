"""Configuration and HTTP API for hangquest."""
