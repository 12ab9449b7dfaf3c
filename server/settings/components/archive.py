"""Metadata mirror settings."""

from server.settings.components import config

# Reconciliation scope: 'path' compares only entries of the listed folder,
# 'global' keeps the legacy whole-mirror comparison.
ARCHIVE_RECONCILE_SCOPE = config('ARCHIVE_RECONCILE_SCOPE', default='path')
