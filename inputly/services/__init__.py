"""Business services: accounts, user management and submissions."""
