"""Agricultural aptitude categories (incisos I to VI).

Static reference data: the six land-use classes a rural property is split
into on the declaration, in the order they are printed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AptitudeCategory:
    """One land-use aptitude class."""

    id: str
    icon: str
    numeral: str
    label: str  # Wording shown next to the area input
    short_label: str  # Wording used in the document tables
    description: str


APTITUDE_CATEGORIES: tuple[AptitudeCategory, ...] = (
    AptitudeCategory(
        id="a1",
        icon="🌱",
        numeral="I",
        label="I — Lavoura — Aptidão Boa",
        short_label="Lavoura — Aptidão Boa",
        description=(
            "Terra apta à cultura temporária ou permanente, sem limitações significativas "
            "para a produção sustentável, com nível mínimo de restrições que não reduzem a "
            "produtividade ou os benefícios expressivamente e não aumentam os insumos acima "
            "de um nível aceitável."
        ),
    ),
    AptitudeCategory(
        id="a2",
        icon="🌿",
        numeral="II",
        label="II — Lavoura — Aptidão Regular",
        short_label="Lavoura — Aptidão Regular",
        description=(
            "Terra apta à cultura temporária ou permanente, que apresenta limitações "
            "moderadas para a produção sustentável, que reduzem a produtividade ou os "
            "benefícios e elevam a necessidade de insumos para garantir as vantagens "
            "globais a serem obtidas com o uso."
        ),
    ),
    AptitudeCategory(
        id="a3",
        icon="⚠️",
        numeral="III",
        label="III — Lavoura — Aptidão Restrita",
        short_label="Lavoura — Aptidão Restrita",
        description=(
            "Terra apta à cultura temporária ou permanente, que apresenta limitações fortes "
            "para a produção sustentável, que reduzem a produtividade ou os benefícios ou "
            "aumentam os insumos necessários, de tal maneira que os custos só seriam "
            "justificados marginalmente."
        ),
    ),
    AptitudeCategory(
        id="a4",
        icon="🐄",
        numeral="IV",
        label="IV — Pastagem Plantada",
        short_label="Pastagem Plantada/Cultivada",
        description=(
            "Terra inapta à exploração de lavouras temporárias ou permanentes por possuir "
            "limitações fortes à produção vegetal sustentável, mas apta a formas menos "
            "intensivas de uso, inclusive sob a forma de pastagens plantadas."
        ),
    ),
    AptitudeCategory(
        id="a5",
        icon="🌳",
        numeral="V",
        label="V — Silvicultura ou Pastagem Natural",
        short_label="Silvicultura ou Pastagem Natural",
        description="Terra inapta aos usos indicados nos incisos I a IV, mas apta a usos menos intensivos.",
    ),
    AptitudeCategory(
        id="a6",
        icon="🌊",
        numeral="VI",
        label="VI — Preservação da Fauna ou Flora",
        short_label="Preservação de Fauna ou Flora",
        description=(
            "Terra inapta para os usos indicados nos incisos I a V, em decorrência de "
            "restrições ambientais, físicas, sociais ou jurídicas que impossibilitam o uso "
            "sustentável, e que, por isso, é indicada para a preservação da flora e da "
            "fauna ou para outros usos não agrários."
        ),
    ),
)


def category_position(category_id: str) -> int:
    """Return the table position of a category id (``"a1"`` -> 0)."""
    for position, category in enumerate(APTITUDE_CATEGORIES):
        if category.id == category_id:
            return position
    raise KeyError(category_id)
