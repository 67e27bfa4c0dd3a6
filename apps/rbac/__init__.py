"""
Role-based access control and identity.

Provides:
- User accounts with a single farm role
- JWT issue and verification
- The immutable route/action policy shared with the UI
"""
