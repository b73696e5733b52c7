"""HTTP API for GitWrap."""
