"""HTTP surface for blogdoc."""
