"""Common utilities: name matching, input validation, TSV I/O and scenarios."""
