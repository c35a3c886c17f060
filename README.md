# personajes

A small library of role-playing characters. Characters print what they do as
they act. Their methods return the damage, effect or outcome that game logic
needs.

## Modules

- `personajes.enums`: the enumerations `Raza`, `EscuelaMagia`, `FuentePoder`,
  `EstiloCombate`, `TipoArmadura` and `MovimientoCombate`. `str()` of a member
  gives its display name, for example `str(EscuelaMagia.EVOCACION)` is
  `"Evocación"` and `str(MovimientoCombate.GOLPE_RAPIDO)` is `"Golpe Rápido"`.
- `personajes.personaje`: `Personaje` is the base character. It holds a name,
  level, hit points, race, attributes and an inventory of up to two weapons.
  `Arma` is a weapon with a `nombre` and a `danio`, and `usar()` returns its
  damage.
- `personajes.mago`: `Mago` adds mana, a school of magic, a power source and
  known spells. Its abilities are `lanzar_hechizo`, `meditar`,
  `invocar_elemental` and `proyectil_magico`.
- `personajes.hechicero`: `Hechicero` has arcane power, an arcane bastion,
  time manipulation (`alterar_tiempo`) and a familiar. A familiar summoned with
  `invocar_familiar` boosts the next spell and is spent on it.
- `personajes.brujo`: `Brujo` has a patron, a demonic pact, hexes and soul
  corruption. Corruption raises its maximum mana and strengthens its spells.
  It can trade health for mana with `sacrificar_vida`.
- `personajes.conjurador`: `Conjurador` makes pacts with creatures, summons
  them, draws protection circles and stores elemental energy. It can break its
  current pact with `romper_pacto` to release that energy as damage.
- `personajes.nigromante`: `Nigromante` raises and controls undead servants,
  drains life from them and gathers death energy. It can create a phylactery
  that saves it from one fatal blow. Damage it takes outside PPT combat is
  reduced by its death resistance.

## Example

```python
from personajes.enums import EscuelaMagia, FuentePoder, MovimientoCombate, Raza
from personajes.hechicero import Hechicero
from personajes.personaje import Arma

merlin = Hechicero(
    "Merlín", 5, 80, Raza.HUMANO, 8, 10, 9, 18,
    100, EscuelaMagia.EVOCACION, FuentePoder.ARCANA,
    12, False, 3, "Arquímedes",
)
merlin.aprender_hechizo("Bola de fuego")
merlin.invocar_familiar()
danio = merlin.lanzar_hechizo("Bola de fuego")

merlin.agregar_arma(Arma("Bastón", 4))   # the first weapon is equipped
golpe = merlin.atacar(MovimientoCombate.GOLPE_RAPIDO)
merlin.mostrar_info()
```

## Errors and failures

- Abilities that cannot be paid for print a message and return `0` or
  `False`. `Mago.gastar_mana` raises `ManaInsuficienteError` when mana is
  short.
- `agregar_arma` raises `InventarioLlenoError` when the inventory is full.
  `quitar_arma` and `equipar_arma` raise `IndexError` for a bad position.
  `arma(posicion)` returns `None` for a bad position.
- Learning a spell or hex, or making a pact, with an empty name raises
  `ValueError`. So does `Brujo.sacrificar_vida` when the sacrifice would leave
  the warlock at 0 health or below.

## Warlock mana shortfalls

When a `Brujo` with more than 10 health lacks mana, it offers to cover the
shortfall with health. The offer is decided by the `confirmar_sacrificio`
callable, which is given the deficit and returns `True` or `False`. Without
one, it asks on standard input and accepts `si` or `no`.

## Randomness

Draining life from an undead servant destroys it one time in three. Pass an
object with a `randrange` method as `rng` to `Nigromante` to control this,
for example a seeded `random.Random`.

## PPT combat

`iniciar_combate_ppt()` saves the current hit points and sets them to 100.
`restaurar_hp_original()` puts the saved value back, and `es_combate_ppt`
reports whether the character is in that mode. `recibir_danio(cantidad, True)`
deals a fixed 10 points for any positive amount.

## What this package does not do

It provides character classes only. There is no command-line program, no
game loop and no duel between characters. The `EstiloCombate` and
`TipoArmadura` enumerations are defined, but no character class in the
package uses them.

## Installation

```
pip install personajes
```

With the test dependencies:

```
pip install "personajes[test]"
```