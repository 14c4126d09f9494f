"""Configuration package: paths, persisted config and derived settings."""
