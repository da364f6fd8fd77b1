"""Game-balance constants grouped by system."""
