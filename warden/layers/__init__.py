"""Layers - Element lookup (sense) and element actions (action)."""
