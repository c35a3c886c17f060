"""Warlock: a mage bound to a patron, casting hexes and trading life for mana."""

from __future__ import annotations

from typing import Callable

from .enums import EscuelaMagia, FuentePoder, Raza
from .mago import ManaInsuficienteError, Mago

COSTO_INVOCAR_PATRON = 20
COSTO_BASE_MALEFICIO = 10
COSTO_DRENAJE = 15
HP_MINIMO_SACRIFICIO = 10


def _preguntar_por_consola(deficit: int) -> bool:
    """Ask on standard input whether to sacrifice life; accepts 'si' or 'no'."""
    respuesta = input().strip()
    while respuesta not in ("si", "no"):
        respuesta = input("Respuesta inválida. Por favor, responda 'si' o 'no': ").strip()
    return respuesta == "si"


class Brujo(Mago):
    """A mage whose power grows with soul corruption and a demonic pact."""

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
        patron: str,
        pacto: int,
        corrupcion: int,
        maldicion: bool,
        confirmar_sacrificio: Callable[[int], bool] | None = None,
    ) -> None:
        super().__init__(
            nombre, nivel, hp, raza, fuerza, destreza, constitucion, inteligencia,
            mana_maximo, escuela, fuente_poder,
        )
        self.patron = patron
        self.pacto = pacto
        self.corrupcion = corrupcion
        self.maldicion = maldicion
        self._maleficios: list[str] = []
        self._confirmar = confirmar_sacrificio or _preguntar_por_consola
        self.mana_maximo += self.corrupcion * 2
        self.mana = self.mana_maximo

    @property
    def maleficios(self) -> tuple[str, ...]:
        """Known hexes, in the order they were learned."""
        return tuple(self._maleficios)

    def _aumentar_corrupcion(self, mensaje: str) -> None:
        self.corrupcion += 1
        print(f"{mensaje} {self.corrupcion}.")

    def invocar_patron(self) -> int:
        """Call on the patron for dark damage; corrupts the soul further."""
        print(f"{self.nombre} invoca el poder de su patrón {self.patron}...")
        if not self._pagar_mana(COSTO_INVOCAR_PATRON):
            return 0
        print(
            f"Una presencia siniestra se hace sentir cuando {self.patron} "
            "responde a la llamada."
        )
        poder = self.pacto * 2 + self.corrupcion
        print(f"El poder del patrón causa {poder} puntos de daño de energía oscura.")
        self._aumentar_corrupcion(f"La corrupción del alma de {self.nombre} aumenta a")
        return poder

    def lanzar_maleficio(self, nombre_maleficio: str) -> int:
        """Cast a known hex; its cost rises with corruption. 0 on failure."""
        if nombre_maleficio not in self._maleficios:
            print(f'{self.nombre} no conoce el maleficio "{nombre_maleficio}".')
            return 0
        if not self._pagar_mana(COSTO_BASE_MALEFICIO + self.corrupcion // 2):
            return 0
        print(f'{self.nombre} lanza el maleficio "{nombre_maleficio}"!')
        poder = self.pacto + self.nivel + self.corrupcion // 2
        print(f"El maleficio causa {poder} puntos de daño oscuro.")
        return poder

    def aprender_maleficio(self, nombre_maleficio: str) -> bool:
        """Learn a hex; return False if it was already known."""
        if not nombre_maleficio:
            raise ValueError("No se puede aprender un maleficio sin nombre.")
        if nombre_maleficio in self._maleficios:
            print(f'{self.nombre} ya conoce el maleficio "{nombre_maleficio}".')
            return False
        self._maleficios.append(nombre_maleficio)
        print(f'{self.nombre} ha aprendido el maleficio "{nombre_maleficio}".')
        self._aumentar_corrupcion("La corrupción del alma aumenta a")
        return True

    def sacrificar_vida(self, cantidad: int) -> None:
        """Trade health for twice as much mana; refuses a sacrifice that would fell."""
        if cantidad <= 0:
            return
        if self.hp <= cantidad:
            raise ValueError(f"{self.nombre} no puede sacrificar tanta vida, se desmayaría.")
        print(f"{self.nombre} sacrifica {cantidad} puntos de vida para obtener poder...")
        self.hp -= cantidad
        mana_ganado = cantidad * 2
        self.mana = min(self.mana_maximo, self.mana + mana_ganado)
        print(
            f"{self.nombre} pierde {cantidad} PV (HP: {self.hp}/{self.hp_max}) "
            f"pero gana {mana_ganado} de maná (Maná: {self.mana}/{self.mana_maximo})."
        )
        self._aumentar_corrupcion("La corrupción del alma aumenta a")

    def drenaje_de_poder(self) -> int:
        """Drain vital power from a target, healing a third of it."""
        print(f"{self.nombre} comienza a drenar poder vital...")
        if not self._pagar_mana(COSTO_DRENAJE):
            return 0
        poder = self.pacto + self.inteligencia // 2
        print(f"¡{self.nombre} drena {poder} puntos de vida del objetivo!")
        recuperacion = poder // 3
        if recuperacion > 0:
            self.curar(recuperacion)
            print(f"{self.nombre} absorbe {recuperacion} puntos de vida drenados.")
        return poder

    def gastar_mana(self, cantidad: int) -> None:
        """Spend mana, offering to cover a shortfall with health first."""
        if self.mana < cantidad and self.hp > HP_MINIMO_SACRIFICIO:
            deficit = cantidad - self.mana
            print(
                f"{self.nombre} no tiene suficiente maná. "
                f"¿Desea sacrificar {deficit} puntos de vida para compensar?"
            )
            if not self._confirmar(deficit):
                raise ManaInsuficienteError(
                    f"{self.nombre} no sacrifica vida y no puede lanzar el hechizo."
                )
            try:
                self.sacrificar_vida(deficit)
            except ValueError as exc:
                print(exc)
        super().gastar_mana(cantidad)

    def lanzar_hechizo(self, nombre_hechizo: str) -> int:
        """Cast a spell, strengthened by soul corruption."""
        efecto = super().lanzar_hechizo(nombre_hechizo)
        if efecto > 0 and self.corrupcion > 0:
            bonus = self.corrupcion // 3
            if bonus > 0:
                print(
                    "La corrupción del alma potencia el hechizo, "
                    f"añadiendo {bonus} al efecto."
                )
                efecto += bonus
        return efecto

    def mostrar_info(self) -> None:
        """Print the warlock's details after the mage's."""
        super().mostrar_info()
        print("  Tipo: Brujo")
        print(f"  Patrón: {self.patron}")
        print(f"  Pacto Demoníaco: {self.pacto}")
        print(f"  Corrupción del Alma: {self.corrupcion}")
        print(f"  Maldición Activa: {'Sí' if self.maldicion else 'No'}")
        if not self._maleficios:
            print("  Maleficios conocidos: Ninguno")
            return
        print("  Maleficios conocidos: ")
        for maleficio in self._maleficios:
            print(f"    - {maleficio}")