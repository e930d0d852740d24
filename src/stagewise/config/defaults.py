"""Starter .stagewise.toml template."""

DEFAULT_TOML = """\
# Stagewise Configuration
version = "1.0"

[status]
strict_ids = false          # true: reject snapshots where two files share an id
initial_selection = "all"   # all | none — selection for files that carry none

[output]
format = "terminal"         # terminal | json
show_summary = true
"""
