"""Sorcerer: a mage empowered by arcane power, time magic and a familiar."""

from __future__ import annotations

from .enums import EscuelaMagia, FuentePoder, Raza
from .mago import Mago

COSTO_BASTION = 15
COSTO_FAMILIAR = 10
COSTO_ALTERAR_TIEMPO = 25


class Hechicero(Mago):
    """A mage whose spells grow with arcane power and an active familiar."""

    def __init__(
        self,
        nombre: str,
        nivel: int,
        hp: int,
        raza: Raza,
        fuerza: int,
        destreza: int,
        constitucion: int,
        inteligencia: int,
        mana_maximo: int,
        escuela: EscuelaMagia,
        fuente_poder: FuentePoder,
        poder_arcano: int,
        bastion_arcano: bool,
        manipulacion_tiempo: int,
        familiar: str,
    ) -> None:
        super().__init__(
            nombre, nivel, hp, raza, fuerza, destreza, constitucion, inteligencia,
            mana_maximo, escuela, fuente_poder,
        )
        self.poder_arcano = poder_arcano
        self.bastion_arcano = bastion_arcano
        self.manipulacion_tiempo = manipulacion_tiempo
        self.familiar = familiar
        self.familiar_activo = False

    def aumentar_poder(self, cantidad: int) -> None:
        """Raise arcane power by a positive amount."""
        if cantidad <= 0:
            return
        self.poder_arcano += cantidad
        print(
            f"{self.nombre} aumenta su poder arcano en {cantidad}. "
            f"Poder arcano: {self.poder_arcano}"
        )

    def activar_bastion_arcano(self) -> bool:
        """Raise the arcane bastion; False if already active or short of mana."""
        if self.bastion_arcano:
            print("El bastión arcano ya está activo.")
            return False
        if not self._pagar_mana(COSTO_BASTION):
            return False
        self.bastion_arcano = True
        print(f"{self.nombre} activa su bastión arcano, protegiéndose de energías mágicas.")
        return True

    def invocar_familiar(self) -> None:
        """Summon the familiar to boost the next spell."""
        if self.familiar_activo:
            print(f"{self.familiar} ya está activo y ayudando a {self.nombre}.")
            return
        if not self._pagar_mana(COSTO_FAMILIAR):
            return
        self.familiar_activo = True
        print(f"{self.nombre} invoca a su familiar {self.familiar}.")
        print(f"{self.familiar} ayudará a {self.nombre} en su próxima acción mágica.")

    def alterar_tiempo(self) -> int:
        """Distort time to deal damage; 0 without the skill or mana."""
        if self.manipulacion_tiempo <= 0:
            print(f"{self.nombre} no tiene habilidades de manipulación temporal.")
            return 0
        if not self._pagar_mana(COSTO_ALTERAR_TIEMPO):
            return 0
        print(f"{self.nombre} altera el flujo temporal...")
        efecto = self.manipulacion_tiempo + self.inteligencia + self.nivel
        print(f"¡El tiempo se distorsiona alrededor, causando {efecto} de daño!")
        return efecto

    def lanzar_hechizo(self, nombre_hechizo: str) -> int:
        """Cast a spell with an arcane bonus; an active familiar is spent on it."""
        danio = super().lanzar_hechizo(nombre_hechizo)
        if danio <= 0:
            return 0
        bonus = self.poder_arcano // 4
        if self.familiar_activo:
            print(f"{self.familiar} potencia el hechizo de {self.nombre}!")
            bonus += self.poder_arcano // 3
            self.familiar_activo = False
        if bonus > 0:
            print(f"Bonus de poder arcano: +{bonus} al daño!")
            danio += bonus
        return danio

    def mostrar_info(self) -> None:
        """Print the sorcerer's details after the mage's."""
        super().mostrar_info()
        print("  Tipo: Hechicero")
        print(f"  Poder Arcano: {self.poder_arcano}")
        print(f"  Bastión Arcano: {'Activo' if self.bastion_arcano else 'Inactivo'}")
        print(f"  Manipulación Temporal: {self.manipulacion_tiempo}")
        estado = "Activo" if self.familiar_activo else "Inactivo"
        print(f"  Familiar: {self.familiar} ({estado})")