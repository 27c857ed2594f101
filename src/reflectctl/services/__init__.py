"""Service layer: document operations returning ServiceResult."""
