"""User directory service: create a user, fetch it back by username."""
