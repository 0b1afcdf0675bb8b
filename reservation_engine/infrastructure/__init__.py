"""
Capa de Infraestructura - Motor de Reservaciones.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).

Estructura:
- db/: Tablas, engine, repositorios SQL y reintentos por deadlock
- in_memory/: Implementaciones in-memory para desarrollo y testing
- services/: Servicios de infraestructura (Clock, UUID)
"""
