"""Connection-bound repositories encapsulating padctl SQL."""
