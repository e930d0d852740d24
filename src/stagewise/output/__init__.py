"""Status reporters — rich terminal and JSON."""
