"""Excepciones de dominio para el motor de reservaciones."""

from typing import Any


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    status_code: int = 400

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def extra(self) -> dict[str, Any]:
        """Campos adicionales que la capa HTTP agrega a la respuesta."""
        return {}


# === Errores de Validación ===


class ValidationError(DomainError):
    """Entrada mal formada o regla de negocio violada."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None, code: str | None = None):
        super().__init__(message=message, code=code or "VALIDATION_ERROR")
        self.field = field

    def extra(self) -> dict[str, Any]:
        return {"field": self.field} if self.field else {}


class InvalidDateRangeError(ValidationError):
    """Rango de fechas inválido (check-out no posterior al check-in, etc.)."""

    def __init__(self, message: str):
        super().__init__(message=message, field="check_out", code="INVALID_DATE_RANGE")


class InvalidStatusTransitionError(ValidationError):
    """La máquina de estados no permite el par (actual, destino)."""

    def __init__(self, current_status: str, target_status: str):
        super().__init__(
            message=f"Invalid status transition: {current_status} -> {target_status}",
            field="status",
            code="INVALID_STATUS_TRANSITION",
        )
        self.current_status = current_status
        self.target_status = target_status

    def extra(self) -> dict[str, Any]:
        return {"current_status": self.current_status, "target_status": self.target_status}


# === Errores de Existencia ===


class NotFoundError(DomainError):
    """La entidad referenciada no existe."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str, code: str | None = None):
        super().__init__(message=f"{entity} not found: {entity_id}", code=code or "NOT_FOUND")
        self.entity = entity
        self.entity_id = entity_id


class ReservationNotFoundError(NotFoundError):
    def __init__(self, reservation_id: str):
        super().__init__("Reservation", reservation_id, code="RESERVATION_NOT_FOUND")


class ResourceNotFoundError(NotFoundError):
    def __init__(self, resource_id: str):
        super().__init__("Resource", resource_id, code="RESOURCE_NOT_FOUND")


class AgentNotFoundError(NotFoundError):
    def __init__(self, agent_id: str):
        super().__init__("Agent", agent_id, code="AGENT_NOT_FOUND")


class CommissionNotFoundError(NotFoundError):
    def __init__(self, commission_id: str):
        super().__init__("Commission", commission_id, code="COMMISSION_NOT_FOUND")


# === Errores de Conflicto ===


class ConflictError(DomainError):
    """Conflicto con el estado persistido."""

    status_code = 409


class AvailabilityConflictError(ConflictError):
    """
    Otra reservación activa ya ocupa las fechas solicitadas.

    Lleva los resúmenes de las reservaciones en conflicto para que el
    cliente pueda ofrecer alternativas.
    """

    def __init__(self, conflicts: list[Any]):
        super().__init__(
            message="Requested resources are not available for the selected dates",
            code="AVAILABILITY_CONFLICT",
        )
        self.conflicts = list(conflicts)

    def extra(self) -> dict[str, Any]:
        return {"conflicts": [conflict.to_dict() for conflict in self.conflicts]}


class DuplicateRecordError(ConflictError):
    """Violación de unicidad al insertar (p.ej. segunda comisión por reservación)."""

    def __init__(self, entity: str, key: str):
        super().__init__(
            message=f"{entity} already exists for key {key}",
            code="DUPLICATE_RECORD",
        )
        self.entity = entity
        self.key = key


# === Efectos secundarios ===


class SideEffectError(DomainError):
    """
    Falla de un efecto secundario posterior al commit (comisión, asiento).

    Nunca se propaga más allá de la actualización de estado: se registra en
    el log y la reconciliación periódica lo repara.
    """

    status_code = 500

    def __init__(self, hook: str, reservation_id: str, cause: BaseException):
        super().__init__(
            message=f"Side effect '{hook}' failed for reservation {reservation_id}: {cause}",
            code="SIDE_EFFECT_FAILED",
        )
        self.hook = hook
        self.reservation_id = reservation_id
        self.cause = cause
