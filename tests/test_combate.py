import itertools

import pytest

from batalla.armas import Espada, Baston
from batalla.combate import (
    DANIO_POR_GOLPE,
    JUGADOR,
    PC,
    Combate,
    Golpe,
    ganador_del_cruce,
    main,
)
from batalla.personajes import Barbaro, Hechicero


def _combate():
    jugador = Barbaro()
    jugador.agregar_arma(Espada())
    pc = Hechicero()
    pc.agregar_arma(Baston())
    return Combate(jugador, pc)


def _entrada(monkeypatch, lineas):
    it = iter(lineas)

    def fake_input(*_args):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_golpe_names_follow_source_labels():
    assert [g.nombre for g in Golpe] == ["Golpe fuerte", "Golpe rapido", "Golpe y defensa"]
    assert ganador_del_cruce(Golpe.FUERTE, Golpe.RAPIDO) == JUGADOR
    assert Golpe.FUERTE.nombre == "Golpe fuerte"
    assert Golpe.RAPIDO.nombre == "Golpe rapido"
    assert Golpe.DEFENSA.nombre == "Golpe y defensa"


@pytest.mark.parametrize("golpe", list(Golpe))
def test_equal_blows_tie(golpe):
    assert ganador_del_cruce(golpe, golpe) is None


@pytest.mark.parametrize(
    "ganador, perdedor",
    [(Golpe.FUERTE, Golpe.RAPIDO), (Golpe.RAPIDO, Golpe.DEFENSA), (Golpe.DEFENSA, Golpe.FUERTE)],
)
def test_winning_pairs(ganador, perdedor):
    assert ganador_del_cruce(ganador, perdedor) == JUGADOR
    assert ganador_del_cruce(perdedor, ganador) == PC


@pytest.mark.parametrize("a, b", list(itertools.permutations(Golpe, 2)))
def test_swapping_sides_swaps_winner(a, b):
    opuesto = {JUGADOR: PC, PC: JUGADOR}
    assert ganador_del_cruce(b, a) == opuesto[ganador_del_cruce(a, b)]


def test_player_win_damages_pc_only():
    combate = _combate()
    assert combate.ronda(Golpe.FUERTE, Golpe.RAPIDO) == JUGADOR
    assert combate.pc.vida == 100 - DANIO_POR_GOLPE
    assert combate.jugador.vida == 100


def test_pc_win_damages_player_only():
    combate = _combate()
    assert combate.ronda(Golpe.FUERTE, Golpe.DEFENSA) == PC
    assert combate.jugador.vida == 100 - DANIO_POR_GOLPE
    assert combate.pc.vida == 100


def test_tie_changes_nothing():
    combate = _combate()
    assert combate.ronda(Golpe.RAPIDO, Golpe.RAPIDO) is None
    assert (combate.jugador.vida, combate.pc.vida) == (100, 100)
    assert not combate.terminado


def test_battle_ends_when_pc_runs_out():
    combate = _combate()
    rondas = 0
    while not combate.terminado and rondas < 100:
        combate.ronda(Golpe.DEFENSA, Golpe.FUERTE)
        rondas += 1
    assert combate.terminado
    assert combate.gano_jugador
    assert combate.pc.vida == 0
    assert rondas * DANIO_POR_GOLPE == 100


def test_battle_lost_when_player_runs_out():
    combate = _combate()
    while not combate.terminado:
        combate.ronda(Golpe.RAPIDO, Golpe.FUERTE)
    assert not combate.gano_jugador
    assert combate.jugador.vida == 0


def test_main_plays_to_the_end(monkeypatch, capsys):
    golpes = itertools.islice(itertools.cycle(["1", "2", "3"]), 3000)
    _entrada(monkeypatch, itertools.chain(["barbaro", "espada"], golpes))
    assert main(["--semilla", "5"]) == 0
    out = capsys.readouterr().out
    assert "Usted esta utilizando al personaje barbaro con el arma espada." in out
    finales = [l for l in out.splitlines() if l.startswith("Usted ha ")]
    assert len(finales) == 1
    assert finales[0] in ("Usted ha ganado la batalla!", "Usted ha perdido la batalla.")


def test_main_ignores_invalid_moves(monkeypatch, capsys):
    golpes = itertools.islice(itertools.cycle(["x", "9", "1", "2", "3"]), 5000)
    _entrada(monkeypatch, itertools.chain(["paladin", "lanza"], golpes))
    assert main(["--semilla", "11"]) == 0
    assert "la batalla" in capsys.readouterr().out


def test_main_rejects_unknown_character(monkeypatch, capsys):
    _entrada(monkeypatch, ["dragon", "espada"])
    assert main(["--semilla", "1"]) == 1
    assert "Tipo de personaje desconocido: dragon" in capsys.readouterr().err


def test_main_rejects_unknown_weapon(monkeypatch, capsys):
    _entrada(monkeypatch, ["barbaro", "arco"])
    assert main(["--semilla", "1"]) == 1
    assert "Tipo de arma desconocido: arco" in capsys.readouterr().err


def test_main_reports_early_end_of_input(monkeypatch, capsys):
    _entrada(monkeypatch, ["barbaro", "espada", "1"])
    assert main(["--semilla", "2"]) == 1
    assert capsys.readouterr().err.strip() != ""