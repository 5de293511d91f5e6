"""Runtime implementations behind the public API."""
