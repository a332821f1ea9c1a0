"""HTTP surface for the domecost engine."""
