# batalla

A small role-playing battle game for the terminal. Warriors (`Barbaro`,
`Caballero`, `Gladiador`, `Mercenario`, `Paladin`) and mages (`Brujo`,
`Conjurador`, `Hechicero`, `Nigromante`) carry combat weapons (`Espada`,
`HachaSimple`, `HachaDoble`, `Lanza`, `Garrote`) and magic items (`Baston`,
`LibroDeHechizos`, `Pocion`, `Amuleto`). Every character starts with 100 HP.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### `batalla-demo`

Arms a sorcerer with a staff and a barbarian with a sword, lets each strike
the other once, and prints both characters in the form
`hechicero (comun), vida: 90`.

### `batalla-plantel [--semilla N]`

Creates a random roster with the factory: three to seven warriors and three to
seven mages, each paired with a number of weapons from 0 to 2. Warriors are
drawn from `barbaro`, `paladin`, `caballero` and `mercenario`. Each entry is
printed as `Personaje: <name>, cantidad de armas asignadas: <n>`. `--semilla`
seeds the random generator so the roster can be reproduced.

### `batalla-combate [--semilla N]`

An interactive battle against the computer on standard input. You type a
character type (for example `paladin`) and a weapon type (for example
`hacha doble`); the computer picks a random character and weapon. Then, in
every round, you enter one of three blows while the computer picks one at
random:

1. Golpe fuerte
2. Golpe rapido
3. Golpe y defensa

A strong blow beats a quick one, a quick blow beats blow-and-defend, and
blow-and-defend beats the strong blow. The loser of a round loses 10 HP; equal
blows do no damage. Input that is not 1, 2 or 3 is ignored and the prompt is
shown again. The battle ends when one side has no life left.

An unknown character or weapon type, or input that ends before the battle is
over, is reported on standard error and the command exits with status 1.
`--semilla` seeds the computer's choices.

## Using the library

### Characters and weapons

```python
from batalla.personajes import Hechicero, Barbaro
from batalla.armas import Baston, Espada

hechicero = Hechicero()
barbaro = Barbaro()
hechicero.agregar_arma(Baston())
barbaro.agregar_arma(Espada())

hechicero.accionar("baston", barbaro)
barbaro.accionar("espada", hechicero)
print(hechicero.info, barbaro.info)
```

A `Personaje` has `nombre`, `tipo`, `defensa`, `vida`, `poder` (`"fuerza"` for
a `Guerrero`, `"magia"` for a `Mago`), `armas` (a copy of the carried weapons)
and `info`. `recibir_danio` and `quitar_vida` lower its health,
`recibir_vida` raises it.

`Personaje.arma(nombre)` returns the first carried weapon with that name and
raises `ArmaNoEncontrada` when there is none. `accionar` uses the named weapon
on a target; when the weapon is missing it writes
`[Error <Class>] ...` to standard error instead of raising.

Every `Arma` has `nombre`, `tipo`, `accion`, `usos`, `danio`, `activo` and
`info`. Each call to `atacar` spends one use; when none are left the weapon
becomes inactive and does nothing. An `ArmaDeCombate` always deals damage; an
`ItemMagico` whose action is `vida` (`Pocion`, `Amuleto`) heals its target
instead.

### Creating by name

```python
from batalla.fabrica import crear_personaje, crear_arma, crear_personaje_armado

brujo = crear_personaje("brujo")
lanza = crear_arma("lanza")
paladin = crear_personaje_armado("paladin", "hacha doble")
```

Character names: `hechicero`, `conjurador`, `brujo`, `nigromante`, `barbaro`,
`paladin`, `caballero`, `mercenario`, `gladiador`. Weapon names: `espada`,
`hacha simple`, `hacha doble`, `lanza`, `garrote`, `baston`,
`libro de hechizos`, `pocion`, `amuleto`. An unknown name raises
`TipoDesconocido`.

### Roster and duel

`batalla.plantel.generar_plantel(rng)` takes a `random.Random` and returns
`(guerreros, magos)`, two lists of `Asignacion` (a `personaje` and a number of
`armas`).

`batalla.combate` provides the `Golpe` enum (`FUERTE`, `RAPIDO`, `DEFENSA`),
`ganador_del_cruce(golpe_jugador, golpe_pc)`, which returns `JUGADOR`, `PC` or
`None` for a tie, and `Combate(jugador, pc)`, whose `ronda` resolves one
exchange and whose `terminado` and `gano_jugador` report the outcome.

## What it does not do

- The roster only records how many weapons each character is assigned; it does
  not create or attach those weapons.
- In the duel, the chosen weapons appear only in the narration: every winning
  blow takes a fixed 10 HP, whatever the weapon.
- There is no saving of characters or games.