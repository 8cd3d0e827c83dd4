"""Core domain: settings, exceptions, schemas and the pagination engine."""
