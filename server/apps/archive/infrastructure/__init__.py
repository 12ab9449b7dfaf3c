"""Infrastructure layer for archive app.

This package contains integrations with external systems:
- Custom S3 storage backend (listing, moves, upload rollback)
- Remote storage provider speaking remote paths

Keep infrastructure concerns separate from business logic.
"""
