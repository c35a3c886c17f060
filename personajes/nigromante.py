"""Necromancer: a mage who raises undead servants and wields death energy."""

from __future__ import annotations

import random
from typing import Protocol

from .enums import EscuelaMagia, FuentePoder, Raza
from .mago import Mago

COSTO_LEVANTAR = 20
ENERGIA_LEVANTAR = 10
COSTO_CONTROLAR = 5
COSTO_TOQUE = 15
ENERGIA_TOQUE = 5
COSTO_FILACTERIA = 50
ENERGIA_FILACTERIA = 30


class _Aleatorio(Protocol):
    def randrange(self, stop: int) -> int: ...


class Nigromante(Mago):
    """A mage who commands the undead and can cheat death with a phylactery."""

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
        poder_necromantico: int,
        energia_muerte: int,
        filacteria: bool,
        resistencia_muerte: int,
        rng: _Aleatorio | None = None,
    ) -> None:
        super().__init__(
            nombre, nivel, hp, raza, fuerza, destreza, constitucion, inteligencia,
            mana_maximo, escuela, fuente_poder,
        )
        self.poder_necromantico = poder_necromantico
        self.energia_muerte = energia_muerte
        self.filacteria = filacteria
        self.resistencia_muerte = resistencia_muerte
        self._servidores: list[str] = []
        self._rng = rng if rng is not None else random.Random()

    @property
    def servidores(self) -> tuple[str, ...]:
        """Undead servants under control, in the order they were raised."""
        return tuple(self._servidores)

    def levantar_no_muerto(self, nombre_no_muerto: str) -> int:
        """Raise an undead servant; return its power, or 0 on failure."""
        print(f"{self.nombre} comienza el ritual para levantar un no-muerto...")
        if not self._pagar_mana(COSTO_LEVANTAR):
            return 0
        if self.energia_muerte < ENERGIA_LEVANTAR:
            print(
                f"Energía de muerte insuficiente (necesitas al menos {ENERGIA_LEVANTAR})."
            )
            return 0
        self.energia_muerte -= ENERGIA_LEVANTAR
        self._servidores.append(nombre_no_muerto)
        print(f"¡{self.nombre} ha levantado a {nombre_no_muerto} de entre los muertos!")
        print(f"Energía de muerte restante: {self.energia_muerte}")
        return self.poder_necromantico + self.nivel

    def controlar_no_muerto(self, nombre_no_muerto: str) -> bool:
        """Reinforce control over a servant; False if unknown or short of mana."""
        if nombre_no_muerto not in self._servidores:
            print(
                f"{self.nombre} no controla a ningún no-muerto llamado {nombre_no_muerto}."
            )
            return False
        if not self._pagar_mana(COSTO_CONTROLAR):
            return False
        print(f"{self.nombre} refuerza su control sobre {nombre_no_muerto}.")
        return True

    def toque_de_la_muerte(self) -> int:
        """Deal necrotic touch damage and gather death energy."""
        print(f"{self.nombre} canaliza energía necromántica en sus manos...")
        if not self._pagar_mana(COSTO_TOQUE):
            return 0
        poder = self.poder_necromantico + self.inteligencia // 2
        print(f"¡{self.nombre} inflige {poder} puntos de daño necrótico con su toque!")
        self.energia_muerte += ENERGIA_TOQUE
        print(f"Energía de muerte aumentada a {self.energia_muerte}.")
        return poder

    def drenar_vida_no_muerto(self, nombre_no_muerto: str) -> int:
        """Heal from a servant's residual life; it may crumble (one in three)."""
        if nombre_no_muerto not in self._servidores:
            print(
                f"{self.nombre} no controla a ningún no-muerto llamado {nombre_no_muerto}."
            )
            return 0
        print(f"{self.nombre} drena la energía vital residual de {nombre_no_muerto}...")
        vida = self.poder_necromantico // 2 + self.nivel
        print(f"{self.nombre} absorbe {vida} puntos de vida.")
        self.curar(vida)
        if self._rng.randrange(3) == 0:
            print(f"{nombre_no_muerto} se desintegra tras ser drenado.")
            self._servidores.remove(nombre_no_muerto)
        else:
            print(f"{nombre_no_muerto} se debilita pero sigue en pie.")
        return vida

    def crear_filacteria(self) -> None:
        """Create a phylactery at the cost of a tenth of maximum health."""
        if self.filacteria:
            print(f"{self.nombre} ya posee una filacteria.")
            return
        if not self._pagar_mana(COSTO_FILACTERIA):
            return
        if self.energia_muerte < ENERGIA_FILACTERIA:
            print(
                f"Energía de muerte insuficiente (necesitas al menos {ENERGIA_FILACTERIA})."
            )
            return
        self.energia_muerte -= ENERGIA_FILACTERIA
        print(f"{self.nombre} realiza un oscuro ritual para crear una filacteria...")
        print(f"Una parte del alma de {self.nombre} es transferida a un receptáculo.")
        self.filacteria = True
        self.hp_max -= self.hp_max // 10
        self.hp = min(self.hp, self.hp_max)
        print(f"¡Filacteria creada! {self.nombre} ha dado un paso hacia la inmortalidad.")
        print(f"HP reducido permanentemente a {self.hp_max} debido al ritual.")

    def recibir_danio(self, cantidad: int, es_combate_ppt: bool = False) -> bool:
        """Take damage reduced by death resistance; a phylactery prevents one death."""
        if not es_combate_ppt and cantidad > 0:
            reduccion = min(cantidad // 4, self.resistencia_muerte)
            if reduccion > 0:
                print(
                    f"{self.nombre} resiste {reduccion} puntos de daño gracias a su "
                    "conexión con la muerte."
                )
                cantidad -= reduccion
            if self.filacteria and self.hp <= cantidad:
                print(f"¡La filacteria de {self.nombre} lo salva de la muerte!")
                self.hp = self.hp_max // 3
                self.filacteria = False
                print(
                    f"La filacteria se ha consumido, pero {self.nombre} sobrevive "
                    f"con {self.hp} puntos de vida."
                )
                return True
        return super().recibir_danio(cantidad, es_combate_ppt)

    def meditar(self) -> None:
        """Meditate for mana and absorb ambient death energy as well."""
        super().meditar()
        self.energia_muerte += self.poder_necromantico // 5 + self.nivel // 2
        print(
            f"{self.nombre} absorbe energía necrótica del ambiente. "
            f"Energía de muerte: {self.energia_muerte}"
        )

    def mostrar_info(self) -> None:
        """Print the necromancer's details after the mage's."""
        super().mostrar_info()
        print("  Tipo: Nigromante")
        print(f"  Poder Necromántico: {self.poder_necromantico}")
        print(f"  Energía de Muerte: {self.energia_muerte}")
        print(f"  Filacteria: {'Sí' if self.filacteria else 'No'}")
        print(f"  Resistencia a Muerte: {self.resistencia_muerte}")
        if not self._servidores:
            print("  Servidores No-Muertos: Ninguno")
            return
        print("  Servidores No-Muertos: ")
        for servidor in self._servidores:
            print(f"    - {servidor}")