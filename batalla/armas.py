"""Weapons and magic items that characters carry into battle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Protocol


class Objetivo(Protocol):
    """Anything that can be hit or healed by a weapon."""

    def recibir_danio(self, danio: int) -> None: ...

    def recibir_vida(self, cantidad: int) -> None: ...


class Arma(ABC):
    """A weapon with a limited number of uses."""

    def __init__(self, nombre: str, tipo: str, accion: str, usos: int, danio: int) -> None:
        self.nombre = nombre
        self.tipo = tipo
        self.accion = accion
        self.usos = usos
        self.danio = danio
        self.activo = True

    @property
    def info(self) -> str:
        return f"{self.nombre} ({self.tipo})"

    def __str__(self) -> str:
        return self.info

    def __repr__(self) -> str:
        return f"{type(self).__name__}(usos={self.usos}, activo={self.activo})"

    def _puede_usarse(self, objetivo: Optional[Objetivo]) -> bool:
        return objetivo is not None and self.usos > 0

    def _consumir(self) -> None:
        self.usos -= 1
        if self.usos == 0:
            self.activo = False

    @abstractmethod
    def atacar(self, objetivo: Optional[Objetivo]) -> None:
        """Use the weapon on the target, spending one use."""


class ArmaDeCombate(Arma):
    """A physical weapon: always deals damage."""

    def atacar(self, objetivo: Optional[Objetivo]) -> None:
        if not self._puede_usarse(objetivo):
            return
        objetivo.recibir_danio(self.danio)
        self._consumir()


class ItemMagico(Arma):
    """A magic item: heals when its action is ``vida``, damages otherwise."""

    def atacar(self, objetivo: Optional[Objetivo]) -> None:
        if not self._puede_usarse(objetivo):
            return
        if self.accion == "vida":
            objetivo.recibir_vida(self.danio)
        else:
            objetivo.recibir_danio(self.danio)
        self._consumir()


class Espada(ArmaDeCombate):
    def __init__(self) -> None:
        super().__init__("espada", "comun", "ataque", 1, 10)


class Garrote(ArmaDeCombate):
    def __init__(self) -> None:
        super().__init__("garrote", "legendario", "ataque", 3, 30)


class HachaSimple(ArmaDeCombate):
    def __init__(self) -> None:
        super().__init__("hachasimple", "comun", "ataque", 1, 10)


class HachaDoble(ArmaDeCombate):
    def __init__(self) -> None:
        super().__init__("hachadoble", "epico", "ataque", 2, 20)


class Lanza(ArmaDeCombate):
    def __init__(self) -> None:
        super().__init__("lanza", "epico", "ataque", 2, 20)


class Amuleto(ItemMagico):
    def __init__(self) -> None:
        super().__init__("amuleto", "legendario", "vida", 2, 2)


class Baston(ItemMagico):
    def __init__(self) -> None:
        super().__init__("baston", "comun", "ataque", 1, 10)


class LibroDeHechizos(ItemMagico):
    def __init__(self) -> None:
        super().__init__("librodehechizos", "epico", "ataque", 2, 20)


class Pocion(ItemMagico):
    def __init__(self) -> None:
        super().__init__("pocion", "epico", "vida", 2, 2)