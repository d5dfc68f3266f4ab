"""Sub-routers HTTP por feature (datasets, pipeline)."""
