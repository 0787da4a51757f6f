"""``strata`` command-line interface."""
