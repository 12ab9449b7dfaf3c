"""Business logic for members and their sessions."""
