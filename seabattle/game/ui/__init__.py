"""Console presentation and input adapters."""
