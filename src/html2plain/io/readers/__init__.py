"""Source document readers."""
