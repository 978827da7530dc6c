"""Errores del pipeline de red.

Por qué una jerarquía plana:
- El caller decide la política de recuperación; el Core solo clasifica.
- Cada error es inmutable y comparable por valor (tipo + campos), así los tests
  pueden afirmar `err == InvalidStatusCode(404)` sin inspeccionar mensajes.
"""

from __future__ import annotations

from typing import Any


class NetworkError(Exception):
    """Base de todos los fallos clasificados por el cliente de red."""

    _fields: tuple[str, ...] = ()

    def _values(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self._fields)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._fields and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple[Any, ...]:
        # Reconstruye desde los campos, no desde `args` (el mensaje).
        return (type(self), self._values())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._values()))

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={value!r}" for name, value in zip(self._fields, self._values()))
        return f"{type(self).__name__}({args})"


class InvalidURL(NetworkError):
    """Reservado para descriptores que no pueden resolver su dirección.

    El Core no lo lanza; un descriptor concreto puede hacerlo antes de llegar al cliente.
    """

    def __init__(self) -> None:
        super().__init__("Invalid URL")


class BadRequest(NetworkError):
    """El descriptor no expone una dirección enviable."""

    def __init__(self) -> None:
        super().__init__("Bad request: descriptor has no address")


class InvalidStatusCode(NetworkError):
    """Status HTTP fuera del intervalo de éxito."""

    _fields = ("code",)

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Invalid status code: {code}")


class DecodingError(NetworkError):
    """El cuerpo no pudo decodificarse a la forma esperada."""

    _fields = ("description",)

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(description)
