"""Service layer behind the ``strata`` CLI: config, the vault engine, utilities."""
