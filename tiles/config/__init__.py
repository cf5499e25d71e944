"""Configuration for tiles: constants and persisted UI preferences."""
