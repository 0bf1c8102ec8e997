"""Console entry points for bloombank."""
