"""Road objects with their outlines, markings, and borders."""
