"""Products table for the direct-persistence backend."""
