"""Core helpers of jsonvault: error taxonomy and file access."""
