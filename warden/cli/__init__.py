"""Command line interface for Warden."""
