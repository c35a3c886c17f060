"""Base character with health, a small weapon inventory and PPT combat mode."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import MovimientoCombate, Raza

MAX_ARMAS = 2
HP_COMBATE_PPT = 100
DANIO_COMBATE_PPT = 10


class InventarioLlenoError(Exception):
    """Raised when a weapon is added to a full inventory."""


@dataclass
class Arma:
    """A weapon a character can carry and use."""

    nombre: str
    danio: int = 0

    def usar(self) -> int:
        """Use the weapon and return the damage it deals."""
        return self.danio


class Personaje:
    """A character with attributes, health and up to two weapons."""

    MAX_ARMAS = MAX_ARMAS

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
    ) -> None:
        self.nombre = nombre
        self.nivel = max(1, nivel)
        self.hp_max = max(1, hp)
        self.hp = self.hp_max
        self.raza = raza
        self.fuerza = fuerza
        self.destreza = destreza
        self.constitucion = constitucion
        self.inteligencia = inteligencia
        self._inventario: list[Arma] = []
        self._pos_equipada: int | None = None
        self._hp_original_ppt = self.hp
        self._en_combate_ppt = False

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    def recibir_danio(self, cantidad: int, es_combate_ppt: bool = False) -> bool:
        """Take damage; return True while the character is still alive.

        In PPT combat every hit deals a fixed amount of damage.
        """
        if cantidad <= 0:
            return True
        danio = DANIO_COMBATE_PPT if es_combate_ppt else cantidad
        self.hp = max(0, self.hp - danio)
        print(f"{self.nombre} recibe {danio} puntos de daño. HP: {self.hp}/{self.hp_max}")
        if self.hp <= 0:
            print(f"¡{self.nombre} ha caído!")
            return False
        return True

    def curar(self, cantidad: int) -> None:
        """Restore health without exceeding the maximum."""
        if cantidad <= 0:
            return
        previo = self.hp
        self.hp = min(self.hp_max, self.hp + cantidad)
        print(
            f"{self.nombre} recupera {self.hp - previo} puntos de vida. "
            f"HP: {self.hp}/{self.hp_max}"
        )

    # ------------------------------------------------------------------
    # Weapons
    # ------------------------------------------------------------------

    @property
    def armas(self) -> tuple[Arma, ...]:
        """The weapons currently carried, in inventory order."""
        return tuple(self._inventario)

    @property
    def arma_equipada_pos(self) -> int | None:
        """Index of the equipped weapon, or None."""
        return self._pos_equipada

    @property
    def arma_equipada(self) -> Arma | None:
        """The equipped weapon, or None."""
        if self._pos_equipada is None:
            return None
        return self._inventario[self._pos_equipada]

    def _posicion_valida(self, posicion: int) -> bool:
        return 0 <= posicion < len(self._inventario)

    def agregar_arma(self, arma: Arma) -> None:
        """Add a weapon; the first one added while unarmed is equipped."""
        if arma is None:
            raise ValueError("No se puede agregar un arma nula al inventario.")
        if len(self._inventario) >= self.MAX_ARMAS:
            raise InventarioLlenoError(
                f"El inventario de {self.nombre} está lleno ({self.MAX_ARMAS} armas máximo)."
            )
        self._inventario.append(arma)
        print(f"Se ha añadido {arma.nombre} al inventario de {self.nombre}.")
        if self._pos_equipada is None:
            self.equipar_arma(len(self._inventario) - 1)

    def quitar_arma(self, posicion: int) -> Arma:
        """Remove and return the weapon at the given index."""
        if not self._posicion_valida(posicion):
            raise IndexError("Posición de arma inválida.")
        arma = self._inventario.pop(posicion)
        if self._pos_equipada is not None:
            if posicion == self._pos_equipada:
                self._pos_equipada = None
            elif posicion < self._pos_equipada:
                self._pos_equipada -= 1
        print(f"{self.nombre} ha quitado {arma.nombre} de su inventario.")
        return arma

    def arma(self, posicion: int) -> Arma | None:
        """Return the weapon at the given index without removing it, or None."""
        if not self._posicion_valida(posicion):
            return None
        return self._inventario[posicion]

    def equipar_arma(self, posicion: int) -> None:
        """Equip the weapon at the given index."""
        if not self._posicion_valida(posicion):
            raise IndexError(
                f"No se puede equipar un arma en la posición {posicion} (posición inválida)."
            )
        self._pos_equipada = posicion
        print(f"{self.nombre} ha equipado {self._inventario[posicion].nombre}.")

    # ------------------------------------------------------------------
    # Combat
    # ------------------------------------------------------------------

    def resolver_movimiento(self, movimiento: MovimientoCombate, arma: Arma | None) -> int:
        """Damage dealt by a move with the given weapon."""
        if arma is None:
            return 0
        return arma.usar()

    def atacar(self, movimiento: MovimientoCombate) -> int:
        """Attack with the equipped weapon; return the damage dealt."""
        arma = self.arma_equipada
        if arma is None:
            print(f"{self.nombre} intenta atacar, pero no tiene ningún arma equipada.")
            return 0
        danio = self.resolver_movimiento(movimiento, arma)
        print(f"{self.nombre} utiliza {movimiento} con {arma.nombre}.")
        return danio

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def mostrar_info(self) -> None:
        """Print the character's general information."""
        print(f"  Nombre: {self.nombre}")
        print(f"  Raza: {self.raza}")
        print(f"  Nivel: {self.nivel}")
        print(f"  HP: {self.hp}/{self.hp_max}")

    def mostrar_inventario(self) -> None:
        """Print the weapons carried, marking the equipped one."""
        print(
            f"Inventario de {self.nombre} "
            f"({len(self._inventario)}/{self.MAX_ARMAS} armas):"
        )
        if not self._inventario:
            print("  (Vacío)")
            return
        for i, arma in enumerate(self._inventario):
            marca = " (Equipada)" if i == self._pos_equipada else ""
            print(f"  [{i}] {arma.nombre}{marca}")

    # ------------------------------------------------------------------
    # PPT combat
    # ------------------------------------------------------------------

    @property
    def es_combate_ppt(self) -> bool:
        """Whether the character is in PPT combat mode."""
        return self._en_combate_ppt

    def iniciar_combate_ppt(self) -> None:
        """Enter PPT combat: save current health and set it to a fixed value."""
        if self._en_combate_ppt:
            return
        self._hp_original_ppt = self.hp
        self.hp = HP_COMBATE_PPT
        self._en_combate_ppt = True

    def restaurar_hp_original(self) -> None:
        """Leave PPT combat and restore the health saved on entry."""
        if not self._en_combate_ppt:
            return
        self.hp = self._hp_original_ppt
        self._en_combate_ppt = False