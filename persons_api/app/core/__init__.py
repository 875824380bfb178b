"""Configuration, logging, errors and synchronisation primitives."""
