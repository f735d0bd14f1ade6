"""Game rules: data loading, unit queries and combat resolution."""
