"""Content store: models, seeding and the storage service."""
