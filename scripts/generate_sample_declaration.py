#!/usr/bin/env python3
"""Generate sample declaration PDFs for manual review.

Each sample is typed into a fresh wizard field by field, walked through
the four steps and saved, so the PDFs in the output folder went through
the same validation as a real declaration.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from itbi_declaration.config import DeclarationConfig, ExportConfig
from itbi_declaration.generators import DeclarationGenerator
from itbi_declaration.logging import setup_logging
from itbi_declaration.models.enums import ExportMode, Step
from itbi_declaration.models.form import SCALAR_FIELDS, FormState
from itbi_declaration.wizard import DeclarationWizard


def fill(wizard: DeclarationWizard, sample: FormState) -> None:
    """Type every sample value into the wizard."""
    for name in sorted(SCALAR_FIELDS):
        wizard.set_field(name, getattr(sample, name))
    for position, entry in enumerate(sample.land_use):
        wizard.set_area(position, entry.value)


def walk_to_review(wizard: DeclarationWizard) -> None:
    """Advance step by step, failing loudly on the first blocked step."""
    while wizard.step != Step.REVIEW:
        if not wizard.next():
            raise SystemExit(f"Step {wizard.step} blocked: {wizard.error_messages()}")


def main() -> None:
    """Generate the sample declarations."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=3, help="Number of declarations")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", type=Path, default=project_root / "local", help="Output folder")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    setup_logging(level=args.log_level)
    config = DeclarationConfig(export=ExportConfig(output_dir=args.output))
    generator = DeclarationGenerator(seed=args.seed)

    print("=" * 60)
    print("Generating Sample Declarations")
    print("=" * 60)

    for index, sample in enumerate(generator.generate_batch(args.count), start=1):
        wizard = DeclarationWizard(config=config)
        fill(wizard, sample)
        walk_to_review(wizard)
        wizard.set_consent(True)
        result = wizard.export(ExportMode.SAVE)
        summary = wizard.reconciliation.display()
        print(f"{index:>3}. {sample.name:<35} {summary['declared_sum']:>16}  -> {result.path}")

    print(f"\nAll files saved to: {args.output}")
    print("=" * 60)


if __name__ == "__main__":
    main()
