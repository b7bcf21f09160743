"""Sample declaration generator."""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal
from typing import Iterator

from itbi_declaration.formatting import format_cpf
from itbi_declaration.generators.base import BaseGenerator
from itbi_declaration.models.aptitude import APTITUDE_CATEGORIES
from itbi_declaration.models.enums import MaritalStatus, RegistryOffice
from itbi_declaration.models.form import FormState

AREA_QUANTUM = Decimal("0.0001")


class DeclarationGenerator(BaseGenerator):
    """Generate completed, reconciled declaration forms."""

    MARITAL_STATUS = list(MaritalStatus)
    MARITAL_WEIGHTS = [0.30, 0.40, 0.12, 0.06, 0.12]

    PROPERTY_KINDS = ["Fazenda", "Sítio", "Chácara", "Estância"]

    # Total registered area range, hectares
    AREA_RANGE = (5, 5000)

    def generate(
        self,
        marital_status: MaritalStatus | None = None,
        with_optional: bool | None = None,
    ) -> FormState:
        """Generate a single declaration.

        Parameters
        ----------
        marital_status : MaritalStatus | None
            Force a marital status; random when ``None``.
        with_optional : bool | None
            Force (or suppress) the optional property fields and notes;
            each is drawn independently when ``None``.

        Returns
        -------
        FormState
            A form that passes validation on every step.
        """
        if marital_status is None:
            marital_status = self.random.choices(
                self.MARITAL_STATUS, weights=self.MARITAL_WEIGHTS, k=1
            )[0]

        def optional(probability: float) -> bool:
            if with_optional is not None:
                return with_optional
            return self.random.random() < probability

        state = FormState(
            name=self.fake.name(),
            cpf=format_cpf(self.fake.cpf()),
            rg=f"{self.fake.rg()} SESDEC/RO",
            marital_status=marital_status.value,
            occupation=self.fake.job(),
            email=self.fake.email() if optional(0.7) else "",
            address=self._address(),
            registry_entry=f"{self.random.randint(1, 99)}.{self.random.randint(0, 999):03d}",
            registry_office=self.random.choice(list(RegistryOffice)).value,
            location=(
                f"Linha {self.random.randint(1, 60)}, Km {self.random.randint(1, 120)}, "
                "Zona Rural — Porto Velho/RO"
            ),
        )

        if marital_status.requires_spouse:
            state.spouse_name = self.fake.name()
            state.spouse_cpf = format_cpf(self.fake.cpf())
            state.spouse_rg = f"{self.fake.rg()} SESDEC/RO"

        if optional(0.7):
            state.property_name = f"{self.random.choice(self.PROPERTY_KINDS)} {self.fake.last_name()}"
        if optional(0.5):
            state.ccir = self._digits(13)
        if optional(0.5):
            state.nirf = self._digits(8)
        if optional(0.3):
            state.itbi_process = f"{self.random.randint(1, 9999):05d}/{self.fake.year()}"
        if optional(0.3):
            state.notes = self.fake.sentence(nb_words=12)

        total = Decimal(self.random.randint(*self.AREA_RANGE) * 10000 + self.random.randint(0, 9999))
        total = (total / 10000).quantize(AREA_QUANTUM)
        state.total_area = str(total)
        for entry, area in zip(state.land_use, self.split_area(total)):
            entry.value = str(area) if area else ""

        return state

    def generate_batch(self, count: int) -> Iterator[FormState]:
        """Generate multiple declarations.

        Parameters
        ----------
        count : int
            Number of declarations to generate.

        Yields
        ------
        FormState
            Generated declarations.
        """
        for _ in range(count):
            yield self.generate()

    def split_area(self, total: Decimal) -> list[Decimal]:
        """Split ``total`` across a random subset of the aptitude categories.

        The parts are quantized to 4 places and sum exactly to ``total``.
        """
        slots = len(APTITUDE_CATEGORIES)
        used = sorted(self.random.sample(range(slots), k=self.random.randint(1, slots)))
        weights = [self.random.uniform(0.1, 1.0) for _ in used]
        weight_sum = sum(weights)

        parts = [Decimal("0")] * slots
        assigned = Decimal("0")
        for position, weight in zip(used[:-1], weights[:-1]):
            share = (total * Decimal(str(weight / weight_sum))).quantize(
                AREA_QUANTUM, rounding=ROUND_DOWN
            )
            parts[position] = share
            assigned += share
        parts[used[-1]] = total - assigned
        return parts

    def _address(self) -> str:
        return (
            f"{self.fake.street_name()}, {self.random.randint(1, 9999)}, "
            f"{self.fake.bairro()}, CEP {self.fake.postcode()}"
        )

    def _digits(self, count: int) -> str:
        return "".join(str(self.random.randint(0, 9)) for _ in range(count))
