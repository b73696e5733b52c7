"""Core configuration, HTTP plumbing, types and models."""
