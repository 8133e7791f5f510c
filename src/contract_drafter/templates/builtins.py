"""Built-in contract template catalog.

Provides the fixed set of templates offered by the drafting form, with
category-level fallbacks for checklists and labels.
"""

from __future__ import annotations

from contract_drafter.core.registry import TemplateRegistry
from contract_drafter.schemas.template import ContractTemplate
from contract_drafter.schemas.types import ContractType, TemplateCategory

CATEGORY_CHECKLISTS: dict[TemplateCategory, tuple[str, ...]] = {
    TemplateCategory.SERVICE: (
        "List of services or deliverables",
        "Payment schedule or retainer",
        "Who owns finished work",
    ),
    TemplateCategory.FINANCE: (
        "Principal amount",
        "Interest rate and repayment schedule",
        "Collateral or security, if any",
    ),
    TemplateCategory.POLICY: (
        "Company legal name",
        "Business address and contact email",
        "Governing state or jurisdiction",
    ),
    TemplateCategory.REAL_ESTATE: (
        "Property address and description",
        "Purchase price or rent",
        "Deposit and inspection details",
    ),
    TemplateCategory.EMPLOYMENT: (
        "Role title and responsibilities",
        "Compensation and equity, if any",
        "Start date and contingencies",
    ),
    TemplateCategory.TRANSACTION: (
        "Item or asset description",
        "Purchase price",
        "Closing or transfer date",
    ),
    TemplateCategory.INTELLECTUAL: (
        "IP being licensed or transferred",
        "Usage or exclusivity scope",
        "Compensation or royalties",
    ),
}

CATEGORY_LABELS: dict[TemplateCategory, str] = {
    TemplateCategory.SERVICE: "Services",
    TemplateCategory.FINANCE: "Deposits & Guarantees",
    TemplateCategory.POLICY: "Policies & Compliance",
    TemplateCategory.REAL_ESTATE: "Real Estate",
    TemplateCategory.EMPLOYMENT: "Employment",
    TemplateCategory.TRANSACTION: "Sales & Transactions",
    TemplateCategory.INTELLECTUAL: "Intellectual Property",
}


def template(
    contract_type: ContractType,
    label: str,
    description: str,
    category: TemplateCategory,
    checklist: list[str] | None = None,
    seo_title: str | None = None,
) -> ContractTemplate:
    """Build a template, falling back to category defaults.

    Args:
        contract_type: Identifier the template is registered under.
        label: Display label.
        description: One-sentence description.
        category: Template category.
        checklist: Type-specific checklist; defaults to the category checklist.
        seo_title: Catalog title; defaults to ``"<label> Template"``.

    Returns:
        The immutable template.
    """
    return ContractTemplate(
        identifier=contract_type.value,
        label=label,
        description=description,
        category=category,
        checklist=tuple(checklist) if checklist is not None else CATEGORY_CHECKLISTS[category],
        seo_title=seo_title if seo_title is not None else f"{label} Template",
        category_label=CATEGORY_LABELS[category],
    )


_SERVICE = TemplateCategory.SERVICE
_FINANCE = TemplateCategory.FINANCE
_POLICY = TemplateCategory.POLICY
_REAL_ESTATE = TemplateCategory.REAL_ESTATE
_EMPLOYMENT = TemplateCategory.EMPLOYMENT
_TRANSACTION = TemplateCategory.TRANSACTION
_INTELLECTUAL = TemplateCategory.INTELLECTUAL


class BuiltinTemplates:
    """Factory for the built-in template catalog.

    Example:
        ```python
        from contract_drafter import BuiltinTemplates

        registry = BuiltinTemplates.create_registry()
        lease = registry.lookup("residential-lease")
        print(lease.category_label)  # "Real Estate"
        ```
    """

    @staticmethod
    def get_all() -> dict[str, ContractTemplate]:
        """Get all built-in templates.

        Returns:
            Dictionary mapping identifiers to templates, in catalog order.
        """
        templates = [
            template(
                ContractType.RESIDENTIAL_LEASE,
                "Residential Lease Agreement",
                "Detailed residential lease covering rent, repairs, and move-out terms.",
                _REAL_ESTATE,
            ),
            template(
                ContractType.RENTAL_RESIDENTIAL,
                "Residential Rental Agreement",
                "Month-to-month or fixed-term rental tailored for homes and apartments.",
                _REAL_ESTATE,
            ),
            template(
                ContractType.RENTAL_COMMERCIAL,
                "Commercial Lease Agreement",
                "Office, retail, or warehouse lease with business-class protections.",
                _REAL_ESTATE,
            ),
            template(
                ContractType.NDA,
                "Mutual NDA",
                "Two-way confidentiality for hiring, fundraising, or partnerships.",
                _POLICY,
            ),
            template(
                ContractType.TEAM_NDA,
                "Team NDA",
                "Multi-party NDA for agencies, investors, and joint ventures.",
                _POLICY,
            ),
            template(
                ContractType.NON_COMPETE,
                "Non-Compete Agreement",
                "Protects against unfair competition or solicitation for a defined period.",
                _EMPLOYMENT,
            ),
            template(
                ContractType.INVESTOR_SAFE,
                "Investor SAFE Agreement",
                "Y Combinator SAFE for early investment rounds.",
                _FINANCE,
                ["Company valuation cap or discount", "Investor name", "Funding amount"],
            ),
            template(
                ContractType.PURCHASE_ORDER,
                "Purchase Order",
                "Binding confirmation of goods, pricing, and delivery expectations.",
                _TRANSACTION,
            ),
            template(
                ContractType.MASTER_SERVICE,
                "Master Service Agreement",
                "Umbrella contract governing multiple statements of work.",
                _SERVICE,
            ),
            template(
                ContractType.CONSULTING_SIMPLE,
                "Consulting Agreement (Simple)",
                "Lightweight consultant engagement for quick projects.",
                _SERVICE,
            ),
            template(
                ContractType.CONSULTING_EXTENDED,
                "Consulting Agreement (Extended)",
                "Full SOW-based consulting contract with milestone tracking.",
                _SERVICE,
            ),
            template(
                ContractType.SOCIAL_MEDIA_INFLUENCER,
                "Social Media Influencer Agreement",
                "Partnership deal for creators, influencers, and sponsors.",
                _SERVICE,
            ),
            template(
                ContractType.CONTRACTOR_1099,
                "Contractor / 1099 Agreement",
                "Independent contractor agreement with tax-safe language.",
                _SERVICE,
            ),
            template(
                ContractType.FREELANCE,
                "Freelance Services Agreement",
                "Scope-driven services contract covering deliverables and ownership.",
                _SERVICE,
            ),
            template(
                ContractType.EMPLOYMENT_OFFER,
                "Employment Offer Letter",
                "At-will offer letter for new hires.",
                _EMPLOYMENT,
            ),
            template(
                ContractType.EMPLOYMENT_OFFER_EXTENDED,
                "Executive Offer Letter",
                "Extended offer letter with bonuses, equity, and covenants.",
                _EMPLOYMENT,
            ),
            template(
                ContractType.GENERAL_SERVICE,
                "Professional Services Agreement",
                "Standard services engagement covering scope, IP, and payments.",
                _SERVICE,
            ),
            template(
                ContractType.PARTNERSHIP_LLC,
                "LLC Partnership Agreement",
                "Operating agreement for co-founders or investors.",
                _TRANSACTION,
            ),
            template(
                ContractType.WEBSITE_TOS,
                "Website Terms of Service",
                "Public-facing TOS for SaaS and e-commerce.",
                _POLICY,
            ),
            template(
                ContractType.PRIVACY_POLICY,
                "Privacy Policy",
                "GDPR + U.S. compliant privacy notice.",
                _POLICY,
            ),
            template(
                ContractType.REFUND_POLICY,
                "Refund & Return Policy",
                "Clear refunds approach for DTC brands.",
                _POLICY,
            ),
            template(
                ContractType.CREATOR_COPYRIGHT_TRANSFER,
                "Creator Copyright Transfer",
                "Transfers ownership of creative work.",
                _INTELLECTUAL,
            ),
            template(
                ContractType.SOFTWARE_LICENSE,
                "Software License Agreement",
                "SaaS or downloadable software license with usage limits.",
                _INTELLECTUAL,
            ),
            template(
                ContractType.SUBCONTRACTOR,
                "Subcontractor Agreement",
                "Agreement between a primary vendor and subcontractor.",
                _SERVICE,
            ),
            template(
                ContractType.MAINTENANCE_SUPPORT,
                "Maintenance & Support Agreement",
                "Post-launch support contract with SLAs and response times.",
                _SERVICE,
            ),
            template(
                ContractType.REAL_ESTATE_PURCHASE,
                "Real Estate Purchase Agreement",
                "Purchase contract covering property details, deposits, and closing.",
                _REAL_ESTATE,
            ),
            template(
                ContractType.BILL_OF_SALE,
                "Bill of Sale",
                "Sale of goods contract with title transfer.",
                _TRANSACTION,
            ),
            template(
                ContractType.VEHICLE_SALE_EXTENDED,
                "Vehicle Sale Agreement",
                "Detailed vehicle sale with disclosures and lien statements.",
                _TRANSACTION,
            ),
            template(
                ContractType.PROMISSORY_NOTE,
                "Promissory Note",
                "Debt acknowledgment outlining principal, interest, and remedies.",
                _FINANCE,
            ),
            template(
                ContractType.LOAN_AGREEMENT,
                "Loan Agreement",
                "Personal or business loan agreement with collateral and repayment.",
                _FINANCE,
            ),
        ]
        return {t.identifier: t for t in templates}

    @classmethod
    def create_registry(cls) -> TemplateRegistry:
        """Create a frozen registry holding every built-in template.

        Returns:
            TemplateRegistry with all built-in templates registered.
        """
        registry = TemplateRegistry()
        for builtin in cls.get_all().values():
            registry.register(builtin)
        registry.freeze()
        return registry


_default_registry: TemplateRegistry | None = None


def default_registry() -> TemplateRegistry:
    """Return the process-wide built-in registry, building it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = BuiltinTemplates.create_registry()
    return _default_registry
