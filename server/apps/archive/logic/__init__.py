"""Business logic layer for archive app.

This package contains all business logic for the metadata mirror:
- Reconciliation of mirrored entries against the remote listing
- Listing and name search over the mirror
- Upload, rename, move and soft removal of entries
- Per-session navigation state

All business logic should be implemented here, separate from
models (data layer), infrastructure (external systems) and views.
"""
