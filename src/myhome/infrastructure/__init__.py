"""Infrastructure adapters: persistence, mail delivery and security lookups."""
