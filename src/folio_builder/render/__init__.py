"""Portfolio rendering: document tree construction and HTML output."""
