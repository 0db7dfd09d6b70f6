"""Characters: warriors and mages that wield weapons."""

from __future__ import annotations

import sys
from typing import Optional

from batalla.armas import Arma


class ArmaNoEncontrada(LookupError):
    """The character does not carry a weapon with the requested name."""


class Personaje:
    """A character with health and a list of weapons."""

    poder = ""
    _sin_arma = "Arma no encontrada"

    def __init__(self, nombre: str, tipo: str, defensa: bool = False, vida: int = 100) -> None:
        self.nombre = nombre
        self.tipo = tipo
        self.defensa = defensa
        self.vida = vida
        self._armas: list[Arma] = []

    @property
    def armas(self) -> list[Arma]:
        return list(self._armas)

    @property
    def info(self) -> str:
        return f"{self.nombre} ({self.tipo}), vida: {self.vida}"

    def __str__(self) -> str:
        return self.info

    def recibir_danio(self, danio: int) -> None:
        self.vida -= danio

    def recibir_vida(self, cantidad: int) -> None:
        self.vida += cantidad

    def quitar_vida(self, cantidad: int) -> None:
        self.vida -= cantidad

    def agregar_arma(self, arma: Arma) -> None:
        self._armas.append(arma)

    def arma(self, nombre: str) -> Arma:
        """Return the first carried weapon named ``nombre``."""
        for arma in self._armas:
            if arma.nombre == nombre:
                return arma
        raise ArmaNoEncontrada(f"{self._sin_arma}: {nombre}")

    def accionar(self, nombre_arma: str, objetivo: Optional["Personaje"]) -> None:
        """Use the named weapon on ``objetivo``; a missing weapon is reported on stderr."""
        try:
            self.arma(nombre_arma).atacar(objetivo)
        except ArmaNoEncontrada as error:
            print(f"[Error {type(self).__name__}] {error}", file=sys.stderr)


class Guerrero(Personaje):
    poder = "fuerza"


class Mago(Personaje):
    poder = "magia"
    _sin_arma = "Item no encontrado"


class Barbaro(Guerrero):
    def __init__(self) -> None:
        super().__init__("barbaro", "comun")


class Caballero(Guerrero):
    def __init__(self) -> None:
        super().__init__("caballero", "epico")


class Gladiador(Guerrero):
    def __init__(self) -> None:
        super().__init__("gladiador", "legendario")


class Mercenario(Guerrero):
    def __init__(self) -> None:
        super().__init__("mercenario", "epico")


class Paladin(Guerrero):
    def __init__(self) -> None:
        super().__init__("paladin", "comun")


class Brujo(Mago):
    def __init__(
        self, nombre: str = "brujo", tipo: str = "comun", defensa: bool = False, vida: int = 100
    ) -> None:
        super().__init__(nombre, tipo, defensa, vida)


class Conjurador(Mago):
    def __init__(self) -> None:
        super().__init__("conjurador", "epico")


class Hechicero(Mago):
    def __init__(self) -> None:
        super().__init__("hechicero", "comun")


class Nigromante(Mago):
    def __init__(self) -> None:
        super().__init__("nigromante", "legendario")