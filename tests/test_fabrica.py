import pytest

from batalla.armas import HachaSimple, LibroDeHechizos
from batalla.fabrica import TipoDesconocido, crear_arma, crear_personaje, crear_personaje_armado
from batalla.personajes import Brujo, Paladin

PERSONAJES = [
    "hechicero", "conjurador", "brujo", "nigromante",
    "barbaro", "paladin", "caballero", "mercenario", "gladiador",
]
ARMAS = [
    "espada", "hacha simple", "hacha doble", "lanza", "garrote",
    "baston", "libro de hechizos", "pocion", "amuleto",
]


@pytest.mark.parametrize("tipo", PERSONAJES)
def test_crear_personaje_por_nombre(tipo):
    p = crear_personaje(tipo)
    assert p.nombre == tipo
    assert p.vida == 100


def test_crear_personaje_devuelve_instancias_nuevas():
    a = crear_personaje("brujo")
    b = crear_personaje("brujo")
    assert isinstance(a, Brujo)
    assert a is not b
    a.quitar_vida(10)
    assert b.vida == a.vida + 10


@pytest.mark.parametrize("tipo", ARMAS)
def test_crear_arma_por_nombre(tipo):
    arma = crear_arma(tipo)
    assert arma.nombre == tipo.replace(" ", "")
    assert arma.activo is True


def test_nombres_con_espacios():
    assert isinstance(crear_arma("hacha simple"), HachaSimple)
    assert isinstance(crear_arma("libro de hechizos"), LibroDeHechizos)
    assert crear_arma("hacha simple").nombre == "hachasimple"


def test_personaje_desconocido():
    with pytest.raises(TipoDesconocido, match="Tipo de personaje desconocido: dragon"):
        crear_personaje("dragon")


def test_arma_desconocida():
    with pytest.raises(TipoDesconocido, match="Tipo de arma desconocido: arco"):
        crear_arma("arco")


def test_personaje_armado_lleva_su_arma():
    p = crear_personaje_armado("paladin", "lanza")
    assert isinstance(p, Paladin)
    assert [a.nombre for a in p.armas] == ["lanza"]
    assert p.arma("lanza") is p.armas[0]


def test_personaje_armado_puede_atacar():
    atacante = crear_personaje_armado("gladiador", "garrote")
    objetivo = crear_personaje("hechicero")
    danio = atacante.arma("garrote").danio
    atacante.accionar("garrote", objetivo)
    assert objetivo.vida == crear_personaje("hechicero").vida - danio


def test_personaje_armado_con_arma_desconocida():
    with pytest.raises(TipoDesconocido):
        crear_personaje_armado("barbaro", "arco")