"""ngpanel HTTP API and session layer."""
