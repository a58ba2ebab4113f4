"""Storage and serialization at the call boundary."""
