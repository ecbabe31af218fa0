"""Adaptateurs : implementations concretes des ports (catalogue, fichiers, CLI)."""
