"""Core del pipeline HTTP: dominio, contratos y servicios.

El Core no importa httpx: depende de abstracciones (`core.interfaces`).
"""
