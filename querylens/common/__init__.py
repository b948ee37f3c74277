"""Shared configuration, constants and database plumbing."""
