"""Features of neo-hashstore."""
