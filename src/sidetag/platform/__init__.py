"""Platform services shared by features: logging and filesystem helpers."""
