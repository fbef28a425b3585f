"""Inputly: user management API with JWT sessions and role-based access."""
