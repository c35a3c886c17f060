"""Conjurer: a mage who binds creatures by pact and channels elemental energy."""

from __future__ import annotations

from .enums import EscuelaMagia, FuentePoder, Raza
from .mago import Mago

COSTO_PACTO = 20
COSTO_INVOCAR_CRIATURA = 15
COSTO_CIRCULO = 10
COSTO_CANALIZAR = 8
ENERGIA_POR_HECHIZO = 5


class Conjurador(Mago):
    """A mage who summons pacted creatures and stores elemental energy."""

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
        poder_invocacion: int,
        circulo_proteccion: bool,
        energia_elemental: int,
        pacto: str | None = None,
    ) -> None:
        super().__init__(
            nombre, nivel, hp, raza, fuerza, destreza, constitucion, inteligencia,
            mana_maximo, escuela, fuente_poder,
        )
        self.poder_invocacion = poder_invocacion
        self.circulo_proteccion = circulo_proteccion
        self.energia_elemental = energia_elemental
        self.pacto_actual: str | None = pacto or None
        self._criaturas: list[str] = [pacto] if pacto else []

    @property
    def criaturas(self) -> tuple[str, ...]:
        """Creatures bound by pact, in the order the pacts were made."""
        return tuple(self._criaturas)

    def realizar_pacto(self, nombre_criatura: str) -> bool:
        """Bind a new creature; False if already bound or short of mana."""
        if not nombre_criatura:
            raise ValueError("No se puede realizar un pacto con una criatura sin nombre.")
        if nombre_criatura in self._criaturas:
            print(f"{self.nombre} ya tiene un pacto con {nombre_criatura}.")
            return False
        if not self._pagar_mana(COSTO_PACTO):
            return False
        self._criaturas.append(nombre_criatura)
        self.pacto_actual = nombre_criatura
        print(f"{self.nombre} realiza un pacto místico con {nombre_criatura}.")
        return True

    def invocar_criatura(self, nombre_criatura: str) -> int:
        """Summon a pacted creature; return its damage, or 0 on failure."""
        if nombre_criatura not in self._criaturas:
            print(f"{self.nombre} no tiene un pacto con {nombre_criatura}.")
            return 0
        if not self._pagar_mana(COSTO_INVOCAR_CRIATURA):
            return 0
        print(f"{self.nombre} invoca a {nombre_criatura}!")
        poder = self.poder_invocacion + self.inteligencia // 2 + self.nivel
        print(f"{nombre_criatura} causa {poder} puntos de daño!")
        return poder

    def dibujar_circulo_proteccion(self) -> bool:
        """Draw a protective circle; False if one exists or mana is short."""
        if self.circulo_proteccion:
            print("Ya hay un círculo de protección activo.")
            return False
        if not self._pagar_mana(COSTO_CIRCULO):
            return False
        self.circulo_proteccion = True
        print(f"{self.nombre} dibuja un círculo de protección mágica a su alrededor.")
        return True

    def canalizar_elementos(self) -> None:
        """Accumulate elemental energy for later spells."""
        print(f"{self.nombre} comienza a canalizar energías elementales...")
        if not self._pagar_mana(COSTO_CANALIZAR):
            return
        self.energia_elemental += 10 + self.inteligencia // 3
        print(
            f"{self.nombre} acumula energía elemental. "
            f"Energía elemental total: {self.energia_elemental}"
        )

    def romper_pacto(self) -> int:
        """Break the current pact violently, releasing all stored energy."""
        if self.pacto_actual is None:
            print(f"{self.nombre} no tiene ningún pacto activo para romper.")
            return 0
        print(f"{self.nombre} rompe violentamente su pacto con {self.pacto_actual}!")
        explosion = self.poder_invocacion * 2 + self.energia_elemental
        print(f"¡La ruptura del pacto libera {explosion} de energía explosiva!")
        if self.pacto_actual in self._criaturas:
            self._criaturas.remove(self.pacto_actual)
        self.pacto_actual = None
        self.energia_elemental = 0
        return explosion

    def lanzar_hechizo(self, nombre_hechizo: str) -> int:
        """Cast a spell, spending some elemental energy for extra damage."""
        danio = super().lanzar_hechizo(nombre_hechizo)
        if danio <= 0:
            return 0
        if self.energia_elemental >= ENERGIA_POR_HECHIZO:
            bonus = self.energia_elemental // ENERGIA_POR_HECHIZO
            self.energia_elemental -= ENERGIA_POR_HECHIZO
            print(
                f"{self.nombre} canaliza energía elemental en el hechizo, "
                f"añadiendo {bonus} al daño!"
            )
            danio += bonus
        return danio

    def mostrar_info(self) -> None:
        """Print the conjurer's details after the mage's."""
        super().mostrar_info()
        print("  Tipo: Conjurador")
        print(f"  Poder de Invocación: {self.poder_invocacion}")
        print(f"  Círculo de Protección: {'Activo' if self.circulo_proteccion else 'Inactivo'}")
        print(f"  Energía Elemental: {self.energia_elemental}")
        print(f"  Pacto Actual: {self.pacto_actual or 'Ninguno'}")
        if not self._criaturas:
            print("  Criaturas Pactadas: Ninguna")
            return
        print("  Criaturas Pactadas: ")
        for criatura in self._criaturas:
            print(f"    - {criatura}")