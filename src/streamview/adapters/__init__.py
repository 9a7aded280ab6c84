"""Adapters connecting the view engine to host infrastructure."""
