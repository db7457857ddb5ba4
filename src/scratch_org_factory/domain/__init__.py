"""Domain layer - core scratch org creation logic and ports."""
