"""Queries (CQRS read operations) and their handlers."""
