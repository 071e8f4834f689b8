"""ngpanel — NGINX site config lifecycle: commit, validate, version, enable."""
