"""Clients for the identity provider and the member directory."""
