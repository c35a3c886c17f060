"""Mage character: mana, known spells and magical abilities."""

from __future__ import annotations

from .enums import EscuelaMagia, FuentePoder, MovimientoCombate, Raza
from .personaje import Arma, Personaje

COSTO_HECHIZO = 10
COSTO_ELEMENTAL = 20
COSTO_PROYECTIL = 5


class ManaInsuficienteError(Exception):
    """Raised when a mage tries to spend more mana than is available."""


class Mago(Personaje):
    """A character that casts spells fuelled by mana."""

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
    ) -> None:
        super().__init__(nombre, nivel, hp, raza, fuerza, destreza, constitucion, inteligencia)
        self.mana_maximo = max(0, mana_maximo)
        self.mana = self.mana_maximo
        self.escuela = escuela
        self.fuente_poder = fuente_poder
        self._hechizos: list[str] = []

    # ------------------------------------------------------------------
    # Mana
    # ------------------------------------------------------------------

    def gastar_mana(self, cantidad: int) -> None:
        """Spend mana, raising ManaInsuficienteError if there is not enough."""
        if cantidad <= 0:
            return
        if self.mana < cantidad:
            raise ManaInsuficienteError(
                f"{self.nombre} no tiene suficiente maná para realizar esta acción."
            )
        self.mana -= cantidad
        print(
            f"{self.nombre} gasta {cantidad} puntos de maná. "
            f"Maná: {self.mana}/{self.mana_maximo}"
        )

    def _pagar_mana(self, cantidad: int) -> bool:
        """Try to spend mana; report the failure and return False if it fails."""
        try:
            self.gastar_mana(cantidad)
        except ManaInsuficienteError as exc:
            print(exc)
            return False
        return True

    def recuperar_mana(self, cantidad: int) -> None:
        """Regain mana without exceeding the maximum."""
        if cantidad <= 0:
            return
        previo = self.mana
        self.mana = min(self.mana_maximo, self.mana + cantidad)
        print(
            f"{self.nombre} recupera {self.mana - previo} puntos de maná. "
            f"Maná: {self.mana}/{self.mana_maximo}"
        )

    # ------------------------------------------------------------------
    # Spells
    # ------------------------------------------------------------------

    @property
    def hechizos(self) -> tuple[str, ...]:
        """Known spells, in the order they were learned."""
        return tuple(self._hechizos)

    def conoce_hechizo(self, nombre_hechizo: str) -> bool:
        """Whether the mage knows the named spell."""
        return nombre_hechizo in self._hechizos

    def aprender_hechizo(self, nombre_hechizo: str) -> bool:
        """Learn a spell; return False if it was already known."""
        if not nombre_hechizo:
            raise ValueError("No se puede aprender un hechizo sin nombre.")
        if self.conoce_hechizo(nombre_hechizo):
            print(f'{self.nombre} ya conoce el hechizo "{nombre_hechizo}".')
            return False
        self._hechizos.append(nombre_hechizo)
        print(f'{self.nombre} ha aprendido el hechizo "{nombre_hechizo}".')
        return True

    def listar_hechizos(self) -> None:
        """Print the known spells."""
        print(f"Hechizos conocidos por {self.nombre}:")
        if not self._hechizos:
            print("  (Ninguno)")
            return
        for numero, hechizo in enumerate(self._hechizos, start=1):
            print(f"  {numero}. {hechizo}")

    def lanzar_hechizo(self, nombre_hechizo: str) -> int:
        """Cast a known spell and return its effect, or 0 if it fails."""
        if not self.conoce_hechizo(nombre_hechizo):
            print(f'{self.nombre} no conoce el hechizo "{nombre_hechizo}".')
            return 0
        if not self._pagar_mana(COSTO_HECHIZO):
            return 0
        print(f'{self.nombre} lanza el hechizo "{nombre_hechizo}"!')
        return 5 + self.nivel + self.inteligencia // 2

    def meditar(self) -> None:
        """Meditate to regain mana based on intelligence."""
        print(f"{self.nombre} medita profundamente...")
        self.recuperar_mana(5 + self.inteligencia // 2)

    def invocar_elemental(self) -> int:
        """Summon an elemental; return the damage dealt, or 0 if it fails."""
        print(f"{self.nombre} comienza a invocar un elemental...")
        if not self._pagar_mana(COSTO_ELEMENTAL):
            return 0
        print(f"¡Un elemental aparece para ayudar a {self.nombre}!")
        return 15 + self.nivel + self.inteligencia

    def proyectil_magico(self) -> int:
        """Fire a magic missile; return the damage dealt, or 0 if it fails."""
        print(f"{self.nombre} conjura un proyectil mágico...")
        if not self._pagar_mana(COSTO_PROYECTIL):
            return 0
        print("¡El proyectil mágico vuela velozmente hacia el objetivo!")
        return 8 + self.nivel // 2 + self.inteligencia // 2

    # ------------------------------------------------------------------
    # Overrides
    # ------------------------------------------------------------------

    def resolver_movimiento(self, movimiento: MovimientoCombate, arma: Arma | None) -> int:
        """Weapon damage, with an intelligence bonus on quick strikes."""
        if arma is None:
            return 0
        danio = arma.usar()
        if movimiento is MovimientoCombate.GOLPE_RAPIDO:
            bonus = self.inteligencia // 4
            if bonus > 0:
                print(f"¡Bonus de inteligencia: +{bonus} al daño!")
                danio += bonus
        return danio

    def mostrar_info(self) -> None:
        """Print the mage's class details."""
        print("  Clase: Mago")
        print(f"  Especialización: {self.escuela}")
        print(f"  Fuente de Poder: {self.fuente_poder}")
        print(f"  Maná: {self.mana}/{self.mana_maximo}")
        print(f"  Hechizos conocidos: {len(self._hechizos)}")