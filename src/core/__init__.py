"""Core: configuration, domain models, layout convention and the build pipeline."""
