from personajes.enums import EscuelaMagia, FuentePoder, Raza
from personajes.hechicero import Hechicero
from personajes.mago import Mago


def crear_hechicero(poder=12, mana=100, manip=4, bastion=False, inteligencia=20):
    return Hechicero(
        "Elminster", 5, 60, Raza.ELFO, 6, 12, 10, inteligencia,
        mana, EscuelaMagia.TRANSMUTACION, FuentePoder.ARCANA,
        poder, bastion, manip, "Cuervo",
    )


def crear_mago(inteligencia=20, mana=100):
    return Mago(
        "Elminster", 5, 60, Raza.ELFO, 6, 12, 10, inteligencia,
        mana, EscuelaMagia.TRANSMUTACION, FuentePoder.ARCANA,
    )


def test_aumentar_poder():
    h = crear_hechicero(poder=12)
    h.aumentar_poder(3)
    h.aumentar_poder(-5)
    assert h.poder_arcano == 15


def test_activar_bastion_cuesta_quince():
    h = crear_hechicero(mana=40)
    assert h.activar_bastion_arcano() is True
    assert h.bastion_arcano
    assert h.mana == 25
    assert h.activar_bastion_arcano() is False
    assert h.mana == 25


def test_activar_bastion_sin_mana():
    h = crear_hechicero(mana=14)
    assert h.activar_bastion_arcano() is False
    assert not h.bastion_arcano


def test_invocar_familiar_cuesta_diez_una_vez():
    h = crear_hechicero(mana=40)
    h.invocar_familiar()
    assert h.familiar_activo
    assert h.mana == 30
    h.invocar_familiar()
    assert h.mana == 30


def test_invocar_familiar_sin_mana():
    h = crear_hechicero(mana=9)
    h.invocar_familiar()
    assert not h.familiar_activo
    assert h.mana == 9


def test_alterar_tiempo_sin_habilidad():
    h = crear_hechicero(manip=0, mana=50)
    assert h.alterar_tiempo() == 0
    assert h.mana == 50


def test_alterar_tiempo_cuesta_veinticinco():
    h = crear_hechicero(manip=4, mana=50)
    assert h.alterar_tiempo() > 0
    assert h.mana == 25


def test_alterar_tiempo_sin_mana():
    h = crear_hechicero(manip=4, mana=24)
    assert h.alterar_tiempo() == 0


def test_hechizo_sin_poder_igual_que_mago():
    h = crear_hechicero(poder=0)
    m = crear_mago()
    h.aprender_hechizo("Rayo")
    m.aprender_hechizo("Rayo")
    assert h.lanzar_hechizo("Rayo") == m.lanzar_hechizo("Rayo")


def test_hechizo_con_poder_supera_mago():
    h = crear_hechicero(poder=12)
    m = crear_mago()
    h.aprender_hechizo("Rayo")
    m.aprender_hechizo("Rayo")
    assert h.lanzar_hechizo("Rayo") > m.lanzar_hechizo("Rayo")


def test_familiar_potencia_y_se_gasta():
    h = crear_hechicero(poder=12, mana=100)
    h.aprender_hechizo("Rayo")
    sin_familiar = h.lanzar_hechizo("Rayo")
    h.invocar_familiar()
    con_familiar = h.lanzar_hechizo("Rayo")
    assert con_familiar > sin_familiar
    assert not h.familiar_activo
    assert h.lanzar_hechizo("Rayo") == sin_familiar


def test_hechizo_desconocido_no_gasta_familiar():
    h = crear_hechicero()
    h.invocar_familiar()
    assert h.lanzar_hechizo("Nada") == 0
    assert h.familiar_activo


def test_mostrar_info(capsys):
    h = crear_hechicero(bastion=True)
    h.mostrar_info()
    salida = capsys.readouterr().out
    assert "Clase: Mago" in salida
    assert "Tipo: Hechicero" in salida
    assert "Bastión Arcano: Activo" in salida
    assert "Familiar: Cuervo (Inactivo)" in salida