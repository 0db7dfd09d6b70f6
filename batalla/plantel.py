"""Random roster of characters built through the factory."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from batalla.fabrica import crear_personaje
from batalla.personajes import Personaje

_GUERREROS = ("barbaro", "paladin", "caballero", "mercenario", "gladiador")
_MAGOS = ("hechicero", "conjurador", "brujo", "nigromante")

_MIN_PERSONAJES = 3
_MAX_PERSONAJES = 7
_MAX_ARMAS = 2


@dataclass(frozen=True)
class Asignacion:
    """A character together with the number of weapons assigned to it."""

    personaje: Personaje
    armas: int

    def __str__(self) -> str:
        return f"Personaje: {self.personaje.nombre}, cantidad de armas asignadas: {self.armas}"


def _grupo(rng: random.Random, nombres: Sequence[str], cantidad: int) -> list[Asignacion]:
    return [
        Asignacion(crear_personaje(rng.choice(nombres)), rng.randint(0, _MAX_ARMAS))
        for _ in range(cantidad)
    ]


def generar_plantel(rng: random.Random) -> tuple[list[Asignacion], list[Asignacion]]:
    """Return ``(guerreros, magos)``, each with three to seven random characters.

    Warriors are drawn from the first four warrior types only.
    """
    cantidad_guerreros = rng.randint(_MIN_PERSONAJES, _MAX_PERSONAJES)
    cantidad_magos = rng.randint(_MIN_PERSONAJES, _MAX_PERSONAJES)
    guerreros = _grupo(rng, _GUERREROS[:4], cantidad_guerreros)
    magos = _grupo(rng, _MAGOS, cantidad_magos)
    return guerreros, magos


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a random roster and print it."""
    parser = argparse.ArgumentParser(
        prog="batalla-plantel",
        description="Crea personajes al azar con la fabrica y los lista.",
    )
    parser.add_argument("--semilla", type=int, default=None, help="semilla del generador")
    args = parser.parse_args(argv)

    rng = random.Random(args.semilla)
    print("\n\nIncizo 2: Pruebo la clase personajes factory.\nInfo de personajes creados: \n")
    guerreros, magos = generar_plantel(rng)
    for asignacion in (*guerreros, *magos):
        print(asignacion)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())