"""Commands (CQRS write operations) and their handlers."""
