"""Recipe Manager Service."""
