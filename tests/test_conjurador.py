import pytest

from personajes.conjurador import Conjurador
from personajes.enums import EscuelaMagia, FuentePoder, Raza


def crear_conjurador(pacto="Ifrit", energia=7, poder=10, mana=100):
    return Conjurador(
        "Selene", 5, 80, Raza.ELFO, 6, 10, 10, 14,
        mana, EscuelaMagia.CONJURACION, FuentePoder.ELEMENTAL,
        poder, False, energia, pacto,
    )


def test_pacto_inicial_registrado():
    c = crear_conjurador(pacto="Ifrit")
    assert c.criaturas == ("Ifrit",)
    assert c.pacto_actual == "Ifrit"


def test_sin_pacto_inicial():
    c = crear_conjurador(pacto="")
    assert c.criaturas == ()
    assert c.pacto_actual is None


def test_realizar_pacto():
    c = crear_conjurador()
    mana = c.mana
    assert c.realizar_pacto("Djinn") is True
    assert c.criaturas == ("Ifrit", "Djinn")
    assert c.pacto_actual == "Djinn"
    assert c.mana == mana - 20


def test_realizar_pacto_duplicado():
    c = crear_conjurador()
    mana = c.mana
    assert c.realizar_pacto("Ifrit") is False
    assert c.mana == mana


def test_realizar_pacto_sin_nombre():
    with pytest.raises(ValueError):
        crear_conjurador().realizar_pacto("")


def test_realizar_pacto_sin_mana():
    c = crear_conjurador()
    c.mana = 0
    assert c.realizar_pacto("Djinn") is False
    assert "Djinn" not in c.criaturas


def test_invocar_criatura_pactada():
    c = crear_conjurador(poder=10)
    mana = c.mana
    assert c.invocar_criatura("Ifrit") == 22
    assert c.mana == mana - 15


def test_invocar_criatura_sin_pacto():
    c = crear_conjurador()
    mana = c.mana
    assert c.invocar_criatura("Kraken") == 0
    assert c.mana == mana


def test_dibujar_circulo_una_vez():
    c = crear_conjurador()
    mana = c.mana
    assert c.dibujar_circulo_proteccion() is True
    assert c.dibujar_circulo_proteccion() is False
    assert c.circulo_proteccion is True
    assert c.mana == mana - 10


def test_canalizar_elementos():
    c = crear_conjurador(energia=0)
    mana = c.mana
    c.canalizar_elementos()
    assert c.energia_elemental == 14
    assert c.mana == mana - 8


def test_canalizar_sin_mana_no_cambia_energia():
    c = crear_conjurador(energia=3)
    c.mana = 0
    c.canalizar_elementos()
    assert c.energia_elemental == 3


def test_romper_pacto():
    c = crear_conjurador(energia=7, poder=10)
    assert c.romper_pacto() == 27
    assert c.pacto_actual is None
    assert c.energia_elemental == 0
    assert "Ifrit" not in c.criaturas


def test_romper_pacto_sin_pacto():
    c = crear_conjurador(pacto="")
    assert c.romper_pacto() == 0


def test_lanzar_hechizo_consume_energia():
    con_energia = crear_conjurador(energia=10)
    sin_energia = crear_conjurador(energia=0)
    for c in (con_energia, sin_energia):
        c.aprender_hechizo("Bola de fuego")
    potenciado = con_energia.lanzar_hechizo("Bola de fuego")
    normal = sin_energia.lanzar_hechizo("Bola de fuego")
    assert potenciado > normal
    assert con_energia.energia_elemental == 5
    assert sin_energia.energia_elemental == 0


def test_lanzar_hechizo_desconocido_no_gasta_energia():
    c = crear_conjurador(energia=10)
    assert c.lanzar_hechizo("Nada") == 0
    assert c.energia_elemental == 10


def test_mostrar_info(capsys):
    c = crear_conjurador(pacto="")
    c.mostrar_info()
    salida = capsys.readouterr().out
    assert "Tipo: Conjurador" in salida
    assert "Pacto Actual: Ninguno" in salida
    assert "Criaturas Pactadas: Ninguna" in salida