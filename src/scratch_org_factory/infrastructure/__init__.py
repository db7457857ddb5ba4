"""Infrastructure layer - logging, configuration sources and project resolution."""
