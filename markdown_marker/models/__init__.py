"""Parse-tree models."""
