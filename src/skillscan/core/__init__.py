"""Core scanning components: rule catalog, matching engine, and report."""
