"""Core building blocks shared by neo-hashstore features."""
