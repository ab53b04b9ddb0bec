"""Packaged data files (default playbook table, sample knowledge base)."""
