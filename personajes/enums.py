"""Enumerations for races, magic, combat styles, armour and combat moves."""

from __future__ import annotations

from enum import Enum


class Raza(Enum):
    """Races available to characters."""

    HUMANO = "Humano"
    ELFO = "Elfo"
    ENANO = "Enano"
    ORCO = "Orco"
    GNOMO = "Gnomo"

    def __str__(self) -> str:
        return self.value


class EscuelaMagia(Enum):
    """Schools of magic a mage can belong to."""

    EVOCACION = "Evocación"
    ABJURACION = "Abjuración"
    CONJURACION = "Conjuración"
    ADIVINACION = "Adivinación"
    ENCANTAMIENTO = "Encantamiento"
    ILUSIONISMO = "Ilusionismo"
    NECROMANCIA = "Necromancia"
    TRANSMUTACION = "Transmutación"

    def __str__(self) -> str:
        return self.value


class FuentePoder(Enum):
    """Sources of magical power."""

    ARCANA = "Arcana"
    DIVINA = "Divina"
    NATURAL = "Natural"
    INFERNAL = "Infernal"
    ELEMENTAL = "Elemental"
    MENTAL = "Mental"

    def __str__(self) -> str:
        return self.value


class EstiloCombate(Enum):
    """Combat styles a warrior can adopt."""

    DEFENSIVO = "Defensivo"
    AGRESIVO = "Agresivo"
    EQUILIBRADO = "Equilibrado"
    BERSERKER = "Berserker"
    TACTICO = "Táctico"

    def __str__(self) -> str:
        return self.value


class TipoArmadura(Enum):
    """Kinds of armour a warrior can wear."""

    LIGERA = "Ligera"
    MEDIA = "Media"
    PESADA = "Pesada"
    MAGICA = "Mágica"
    NINGUNA = "Ninguna"

    def __str__(self) -> str:
        return self.value


class MovimientoCombate(Enum):
    """Basic combat moves."""

    GOLPE_FUERTE = "Golpe Fuerte"
    GOLPE_RAPIDO = "Golpe Rápido"
    DEFENSA_Y_GOLPE = "Defensa y Golpe"

    def __str__(self) -> str:
        return self.value