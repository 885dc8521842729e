"""HTTP surface for the session configurator."""
