"""Implementación real del generador de identificadores."""

import uuid

from reservation_engine.application.interfaces.uuid_generator import UUIDGenerator


class UUIDGeneratorImpl(UUIDGenerator):
    def generate_uuid(self) -> str:
        """Genera un UUID v4 aleatorio."""
        return str(uuid.uuid4())
