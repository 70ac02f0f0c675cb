"""Domain services (region names, definitions, registration cycle)."""
