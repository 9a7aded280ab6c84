"""Core view resolution: models, matching and stream overlay."""
