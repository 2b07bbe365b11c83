"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, sessions and email verification
- password_reset/: Reset token lifecycle
- locations/: Favourite locations
"""
