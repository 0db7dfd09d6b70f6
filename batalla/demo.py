"""Short demonstration: a sorcerer and a barbarian trade one blow each."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from batalla.armas import Baston, Espada
from batalla.personajes import Barbaro, Hechicero


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Arm two characters, let them attack each other and print their state."""
    parser = argparse.ArgumentParser(
        prog="batalla-demo",
        description="Verifica el funcionamiento de personajes y armas.",
    )
    parser.parse_args(argv)

    print("Incizo 1: Verifico funcionamiento de mis clases.")
    hechicero = Hechicero()
    barbaro = Barbaro()

    hechicero.agregar_arma(Baston())
    barbaro.agregar_arma(Espada())

    hechicero.accionar("baston", barbaro)
    barbaro.accionar("espada", hechicero)

    print(hechicero.info)
    print(barbaro.info)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())