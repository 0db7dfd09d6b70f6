"""Creation of characters and weapons by name."""

from __future__ import annotations

from typing import Callable

from batalla.armas import (
    Amuleto,
    Arma,
    Baston,
    Espada,
    Garrote,
    HachaDoble,
    HachaSimple,
    Lanza,
    LibroDeHechizos,
    Pocion,
)
from batalla.personajes import (
    Barbaro,
    Brujo,
    Caballero,
    Conjurador,
    Gladiador,
    Hechicero,
    Mercenario,
    Nigromante,
    Paladin,
    Personaje,
)


class TipoDesconocido(ValueError):
    """The requested character or weapon type does not exist."""


_PERSONAJES: dict[str, Callable[[], Personaje]] = {
    "hechicero": Hechicero,
    "conjurador": Conjurador,
    "brujo": Brujo,
    "nigromante": Nigromante,
    "barbaro": Barbaro,
    "paladin": Paladin,
    "caballero": Caballero,
    "mercenario": Mercenario,
    "gladiador": Gladiador,
}

_ARMAS: dict[str, Callable[[], Arma]] = {
    "espada": Espada,
    "hacha simple": HachaSimple,
    "hacha doble": HachaDoble,
    "lanza": Lanza,
    "garrote": Garrote,
    "baston": Baston,
    "libro de hechizos": LibroDeHechizos,
    "pocion": Pocion,
    "amuleto": Amuleto,
}


def crear_personaje(tipo: str) -> Personaje:
    """Return a new character of the given type."""
    try:
        return _PERSONAJES[tipo]()
    except KeyError:
        raise TipoDesconocido(f"Tipo de personaje desconocido: {tipo}") from None


def crear_arma(tipo: str) -> Arma:
    """Return a new weapon of the given type."""
    try:
        return _ARMAS[tipo]()
    except KeyError:
        raise TipoDesconocido(f"Tipo de arma desconocido: {tipo}") from None


def crear_personaje_armado(tipo_personaje: str, tipo_arma: str) -> Personaje:
    """Return a new character already carrying one weapon."""
    personaje = crear_personaje(tipo_personaje)
    personaje.agregar_arma(crear_arma(tipo_arma))
    return personaje