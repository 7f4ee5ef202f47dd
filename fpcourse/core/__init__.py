"""
Core domain types, functional primitives, and named errors.

Этот пакет не зависит от уроков, CLI и конфигурации: уроки и сессия
строятся поверх него.
"""
