"""Clause library used by the composer."""

from contract_drafter.clauses.library import (
    additional_notes_clause,
    arbitration_clause,
    business_terms_clause,
    coalesce,
    confidentiality_clause,
    custom_clauses,
    finance_clauses,
    governing_law_clause,
    has_text,
    indemnification_clause,
    ip_ownership_clause,
    liability_cap_clause,
    non_solicitation_clause,
    overview_clause,
    party_label,
    policy_clause,
    property_clauses,
    render_clause,
    service_clauses,
    signature_block,
    standard_clauses,
)

__all__ = [
    "additional_notes_clause",
    "arbitration_clause",
    "business_terms_clause",
    "coalesce",
    "confidentiality_clause",
    "custom_clauses",
    "finance_clauses",
    "governing_law_clause",
    "has_text",
    "indemnification_clause",
    "ip_ownership_clause",
    "liability_cap_clause",
    "non_solicitation_clause",
    "overview_clause",
    "party_label",
    "policy_clause",
    "property_clauses",
    "render_clause",
    "service_clauses",
    "signature_block",
    "standard_clauses",
]
