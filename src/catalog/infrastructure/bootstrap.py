"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.authenticate import AuthenticationService
from catalog.infrastructure.config import StorageSettings, load_settings
from catalog.infrastructure.persistence.json_document_store import JsonDocumentStore
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def document_store(settings: StorageSettings | None = None) -> JsonDocumentStore:
    settings = settings or load_settings()
    return JsonDocumentStore(settings.products_file_path, settings)


def product_repository(settings: StorageSettings | None = None) -> JsonProductRepository:
    return JsonProductRepository(document_store(settings))


def authentication_service() -> AuthenticationService:
    return AuthenticationService()
