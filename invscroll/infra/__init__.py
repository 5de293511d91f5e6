"""Environment and logging setup for embedding hosts."""
