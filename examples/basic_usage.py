"""Example: Basic usage of contract-drafter."""

import logging

from contract_drafter import (
    ContractComposer,
    DraftingConfig,
    PayloadValidationError,
    TemplateNotFoundError,
    default_registry,
)

logging.basicConfig(level=logging.DEBUG)


LEASE_FORM = {
    "contractType": "residential-lease",
    "partyOneName": "Oakview Homes LLC",
    "partyOneAddress": "900 Market St, Austin, TX",
    "partyTwoName": "Jordan Ellis",
    "partyTwoAddress": "12 Elm Ct, Austin, TX",
    "effectiveDate": "2025-03-01",
    "termEnd": "2026-02-28",
    "governingLaw": "TX",
    "relationshipSummary": "Twelve-month lease of a single-family home.",
    "propertyAddress": "214 Oakview Dr",
    "purchasePrice": "$2150/mo",
    "depositAmount": "$2150",
    "optionalClauses": ["Tenant may keep one cat under 15 lbs."],
}


def example_basic_generation() -> None:
    """Generate a lease from raw form data."""
    print("=" * 60)
    print("Example 1: Residential Lease")
    print("=" * 60)

    composer = ContractComposer(config=DraftingConfig(strict_validation=True))
    contract = composer.generate("residential-lease", LEASE_FORM)

    print(contract.title)
    print(" / ".join(contract.headings()))
    print(contract.content)


def example_catalog() -> None:
    """List the catalog grouped by category."""
    print("\n" + "=" * 60)
    print("Example 2: Template Catalog")
    print("=" * 60)

    registry = default_registry()
    for identifier in registry:
        template = registry.lookup(identifier)
        print(f"{template.category_label:<24} {template.label}")
        for item in template.checklist:
            print(f"{'':<24}  - {item}")


def example_failures() -> None:
    """Show the two failure modes callers map to client errors."""
    print("\n" + "=" * 60)
    print("Example 3: Failures")
    print("=" * 60)

    composer = ContractComposer(config=DraftingConfig(strict_validation=True))

    try:
        composer.generate("not-a-real-type", LEASE_FORM)
    except TemplateNotFoundError as e:
        print(f"Unknown template: {e.contract_type}")

    try:
        composer.generate("residential-lease", {**LEASE_FORM, "governingLaw": "XX"})
    except PayloadValidationError as e:
        for error in e.validation_errors:
            print(f"Invalid {'.'.join(str(p) for p in error['loc'])}: {error['msg']}")


if __name__ == "__main__":
    example_basic_generation()
    example_catalog()
    example_failures()
