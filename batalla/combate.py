"""Turn-based duel between the player and the computer."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence

from batalla.fabrica import TipoDesconocido, crear_personaje_armado
from batalla.personajes import Personaje

JUGADOR = "jugador"
PC = "pc"
DANIO_POR_GOLPE = 10

_PERSONAJES = (
    "hechicero",
    "conjurador",
    "brujo",
    "nigromante",
    "barbaro",
    "paladin",
    "caballero",
    "mercenario",
    "gladiador",
)
_ARMAS = (
    "espada",
    "hacha simple",
    "hacha doble",
    "lanza",
    "garrote",
    "baston",
    "libro de hechizos",
    "pocion",
    "amuleto",
)


class Golpe(IntEnum):
    """The three blows; each beats exactly one of the others."""

    FUERTE = 1
    RAPIDO = 2
    DEFENSA = 3

    @property
    def nombre(self) -> str:
        return _NOMBRES[self]


_NOMBRES = {
    Golpe.FUERTE: "Golpe fuerte",
    Golpe.RAPIDO: "Golpe rapido",
    Golpe.DEFENSA: "Golpe y defensa",
}

_VENCE_A = {
    Golpe.FUERTE: Golpe.RAPIDO,
    Golpe.RAPIDO: Golpe.DEFENSA,
    Golpe.DEFENSA: Golpe.FUERTE,
}


def ganador_del_cruce(golpe_jugador: Golpe, golpe_pc: Golpe) -> Optional[str]:
    """Return ``JUGADOR`` or ``PC`` for the winning side, or ``None`` on a tie."""
    if golpe_jugador == golpe_pc:
        return None
    if _VENCE_A[golpe_jugador] == golpe_pc:
        return JUGADOR
    return PC


@dataclass
class Combate:
    """A duel that lasts until one side has no health left."""

    jugador: Personaje
    pc: Personaje

    @property
    def terminado(self) -> bool:
        return self.jugador.vida <= 0 or self.pc.vida <= 0

    @property
    def gano_jugador(self) -> bool:
        return self.jugador.vida > 0

    def ronda(self, golpe_jugador: Golpe, golpe_pc: Golpe) -> Optional[str]:
        """Resolve one exchange; the loser loses ``DANIO_POR_GOLPE`` health."""
        ganador = ganador_del_cruce(golpe_jugador, golpe_pc)
        if ganador == JUGADOR:
            self.pc.quitar_vida(DANIO_POR_GOLPE)
        elif ganador == PC:
            self.jugador.quitar_vida(DANIO_POR_GOLPE)
        return ganador


def _narrar(combate: Combate, ganador: Optional[str], golpe_jugador: Golpe, golpe_pc: Golpe) -> str:
    jugador, pc = combate.jugador, combate.pc
    if ganador is None:
        return f"Ambos jugadores han usado el golpe {golpe_jugador.nombre} y ninguno recibe danio"
    if ganador == JUGADOR:
        ataque = (
            f"El {jugador.nombre} ha atacado con el arma {jugador.armas[0].nombre} "
            f"al jugador {pc.nombre}, usando el {golpe_jugador.nombre} "
            f"y le ha restado {DANIO_POR_GOLPE} de HP."
        )
    else:
        ataque = (
            f"El {pc.nombre} lo ha atacado con el arma {pc.armas[0].nombre}, "
            f"usando el {golpe_pc.nombre}, y le ha restado {DANIO_POR_GOLPE} de HP."
        )
    estado = f"Usted tiene {jugador.vida} de HP y el oponente tiene {pc.vida} de HP."
    return f"{ataque}\n{estado}"


def _leer_golpe() -> Optional[Golpe]:
    try:
        return Golpe(int(input().strip()))
    except ValueError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a duel against the computer on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="batalla-combate",
        description="Batalla entre un personaje elegido por el jugador y la PC.",
    )
    parser.add_argument("--semilla", type=int, default=None, help="semilla del generador")
    args = parser.parse_args(argv)
    rng = random.Random(args.semilla)

    print("\n\nIncizo 3: batalla entre dos personajes:\n")
    try:
        print("Batalla entre usted y la PC.\nIngrese que guerrero quiere utilizar:")
        tipo_personaje = input().strip()
        print("Y que arma desea usar")
        tipo_arma = input().strip()
        jugador = crear_personaje_armado(tipo_personaje, tipo_arma)
        pc = crear_personaje_armado(rng.choice(_PERSONAJES), rng.choice(_ARMAS))
        print(
            f"Usted esta utilizando al personaje {jugador.nombre} "
            f"con el arma {jugador.armas[0].nombre}."
        )
        print(f"La batalla va a ser contra el {pc.nombre} con el arma {pc.armas[0].nombre}.")

        combate = Combate(jugador, pc)
        while not combate.terminado:
            print(
                "Elija el movimiento que desea hacer:\n"
                "(1) Golpe fuerte\n(2) Golpe rapido\n(3) Golpe y defensa"
            )
            golpe_jugador = _leer_golpe()
            golpe_pc = Golpe(rng.randint(1, 3))
            if golpe_jugador is None:
                continue
            ganador = combate.ronda(golpe_jugador, golpe_pc)
            print(_narrar(combate, ganador, golpe_jugador, golpe_pc))
    except TipoDesconocido as error:
        print(error, file=sys.stderr)
        return 1
    except EOFError:
        print("Entrada terminada antes del fin de la batalla.", file=sys.stderr)
        return 1

    if combate.gano_jugador:
        print("Usted ha ganado la batalla!")
    else:
        print("Usted ha perdido la batalla.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())