"""API route modules, one per portal area."""
