"""Cross-cutting infrastructure such as logging."""
