"""Shared building blocks: run context, logging, document scanning and path resolution."""
