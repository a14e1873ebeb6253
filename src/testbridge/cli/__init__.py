"""testbridge CLI - tbridge command."""
