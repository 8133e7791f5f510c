"""Clause renderers.

Every function here is pure: it reads the payload (and sometimes the
template) and returns formatted text. Missing optional fields fall back
to placeholder wording and never raise.
"""

from __future__ import annotations

from contract_drafter.schemas.payload import ContractFormPayload
from contract_drafter.schemas.template import ContractTemplate

SIGNATURE_HEADING = "SIGNATURES"
CUSTOM_CLAUSE_SUMMARY = "Added by the contract creator."

# (payload attribute, heading, summary) in rendering order
SERVICE_SECTIONS: tuple[tuple[str, str, str], ...] = (
    ("scope_of_work", "Scope of Services", "Summarizes the duties and expectations."),
    ("deliverables", "Deliverables", "Lists what will be produced or handed over."),
    ("milestones", "Milestones & Timeline", "Outlines key checkpoints or review dates."),
    ("warranty_terms", "Quality & Revisions", "Explains revision rounds or warranty coverage."),
    (
        "revisions",
        "Revision Windows",
        "Defines how many revision rounds or change requests are included.",
    ),
    (
        "service_guarantees",
        "Service Guarantees",
        "Outlines uptime promises, response times, or satisfaction guarantees.",
    ),
)


def has_text(value: str | None) -> bool:
    """Return True if value holds non-whitespace text."""
    return value is not None and value.strip() != ""


def coalesce(*values: str | None, default: str) -> str:
    """Return the first value holding text, else the default.

    Args:
        *values: Candidates in order of preference.
        default: Literal used when every candidate is blank.

    Returns:
        The chosen text.
    """
    for value in values:
        if has_text(value):
            return value  # type: ignore[return-value]
    return default


def render_clause(heading: str, summary: str, body: str) -> str:
    """Format one clause block.

    The block is an upper-case heading, a ``Summary:`` line, a blank line,
    and the body, surrounded by newlines.
    """
    return f"\n{heading.upper()}\nSummary: {summary.strip()}\n\n{body.strip()}\n"


def signature_block() -> str:
    return (
        f"\n{SIGNATURE_HEADING}\n\n"
        "Party A: ________________________________    Date: __________________\n"
        "Party B: ________________________________    Date: __________________\n"
    )


def party_label(payload: ContractFormPayload) -> str:
    """Name both parties with their quoted role labels."""
    return (
        f"{payload.party_one_name} (“Party A”) and "
        f"{payload.party_two_name} (“Party B”)"
    )


# ---------------------------------------------------------------------------
# Required clauses
# ---------------------------------------------------------------------------


def overview_clause(template: ContractTemplate, payload: ContractFormPayload) -> str:
    summary = coalesce(
        payload.plain_summary_intro,
        payload.relationship_summary,
        default=(
            f"This document outlines how {payload.party_one_name} and "
            f"{payload.party_two_name} will work together."
        ),
    )
    body = (
        f"{template.description} This agreement is effective {payload.effective_date} "
        f"and binds {party_label(payload)}."
    )
    return render_clause("Plain-English Overview", summary, body)


def business_terms_clause(payload: ContractFormPayload) -> str:
    summary = coalesce(
        payload.payment_details,
        payload.payment_terms,
        default="Defines compensation, timing, and other commercial expectations.",
    )
    compensation = coalesce(
        payload.payment_details,
        payload.payment_terms,
        default="As described in the attached schedule",
    )
    start = coalesce(payload.term_start, default=payload.effective_date)
    end = coalesce(payload.term_end, default="until completion")
    body = f"Compensation: {compensation}\nTerm: {start} through {end}."
    return render_clause("Business Terms", summary, body)


# ---------------------------------------------------------------------------
# Category clauses
# ---------------------------------------------------------------------------


def service_clauses(payload: ContractFormPayload) -> list[str]:
    """Render the service/employment sections whose fields are filled in."""
    sections: list[str] = []
    for attribute, heading, summary in SERVICE_SECTIONS:
        value = getattr(payload, attribute)
        if has_text(value):
            sections.append(render_clause(heading, summary, value))
    return sections


def finance_clauses(payload: ContractFormPayload) -> list[str]:
    """Render the Financial Terms clause.

    Omitted entirely when interest rate, repayment schedule, and collateral
    are all blank.
    """
    if not any(
        has_text(v)
        for v in (payload.interest_rate, payload.repayment_schedule, payload.collateral)
    ):
        return []
    summary = "Details the payment schedule, interest, penalties, and collateral."
    body = (
        f"Interest Rate: {coalesce(payload.interest_rate, default='As agreed')}\n"
        "Repayment Schedule: "
        f"{coalesce(payload.repayment_schedule, default='See attached amortization')}\n"
        f"Collateral: {coalesce(payload.collateral, default='None')}\n"
        f"Late Fees: {coalesce(payload.late_fees, default='As permitted by law')}"
    )
    if has_text(payload.finance_penalties):
        body += f"\nPenalties: {payload.finance_penalties}"
    return [render_clause("Financial Terms", summary, body)]


def property_clauses(payload: ContractFormPayload) -> list[str]:
    """Render the Property Details clause.

    Omitted when both property address and purchase price are blank.
    """
    if not (has_text(payload.property_address) or has_text(payload.purchase_price)):
        return []
    summary = "Identifies the property, purchase price, and deposit expectations."
    price = coalesce(payload.purchase_price, payload.payment_details, default="See schedule")
    body = (
        f"Property: {coalesce(payload.property_address, default='Described in Exhibit A')}\n"
        f"Price/Rent: {price}\n"
        f"Deposit: {coalesce(payload.deposit_amount, default='Per invoice')}"
    )
    return [render_clause("Property Details", summary, body)]


def policy_clause(template: ContractTemplate, payload: ContractFormPayload) -> str:
    return render_clause(
        "Policy Statement",
        "Explains how users or customers should interact with your product or brand.",
        f"{template.description} {payload.party_one_name} may update this policy by "
        "providing notice to impacted users.",
    )


# ---------------------------------------------------------------------------
# Toggle clauses
# ---------------------------------------------------------------------------


def confidentiality_clause() -> str:
    return render_clause(
        "Confidentiality",
        "Sensitive information must remain private unless disclosure is legally required.",
        "Each party agrees to use reasonable care to protect Confidential Information, "
        "restrict disclosure to personnel with a need to know, and destroy or return "
        "copies upon request.",
    )


def ip_ownership_clause(payload: ContractFormPayload) -> str:
    body = coalesce(
        payload.ownership_details,
        default=(
            f"Unless otherwise agreed, all deliverables created by {payload.party_one_name} "
            f"for {payload.party_two_name} are deemed work made for hire and owned by "
            f"{payload.party_two_name}."
        ),
    )
    return render_clause(
        "Intellectual Property",
        "Clarifies who owns the work product and what usage rights apply.",
        body,
    )


def non_solicitation_clause() -> str:
    return render_clause(
        "Non-Solicitation",
        "Prevents either party from poaching talent or clients for a stated period.",
        "During the term and for twelve (12) months thereafter, neither party will "
        "solicit or hire the other party's employees or key contractors, except through "
        "general job postings.",
    )


def arbitration_clause(state: str) -> str:
    return render_clause(
        "Arbitration",
        "Disputes will be resolved privately instead of in open court.",
        f"Any dispute shall be resolved by binding arbitration administered in {state}, "
        "with judgment on the award enforceable in any competent court.",
    )


def indemnification_clause() -> str:
    return render_clause(
        "Indemnification",
        "Protects each party if the other causes losses or lawsuits.",
        "Each party agrees to indemnify, defend, and hold harmless the other party from "
        "third-party claims arising from the indemnifying party's breach, negligence, or "
        "intentional misconduct.",
    )


def liability_cap_clause() -> str:
    return render_clause(
        "Limitation of Liability",
        "Caps monetary exposure so neither party is bankrupted by indirect losses.",
        "Except for fraud or intentional misconduct, neither party will be liable for "
        "consequential damages, and aggregate liability is capped at the fees paid in the "
        "twelve (12) months preceding the claim.",
    )


# ---------------------------------------------------------------------------
# Standard and trailing clauses
# ---------------------------------------------------------------------------


def standard_clauses(payload: ContractFormPayload) -> list[str]:
    """Render the boilerplate every agreement carries, in fixed order."""
    return [
        render_clause(
            "Representations & Warranties",
            "Both parties confirm they have the authority to sign and will share truthful "
            "information.",
            f"{party_label(payload)} each represent and warrant that they are duly "
            "organized, authorized to enter this agreement, and will provide accurate "
            "information required to perform their obligations.",
        ),
        render_clause(
            "Termination",
            "Explains how either party can end the relationship if things go off track.",
            "Either party may terminate for non-payment or material breach not cured within "
            "ten (10) days' notice. Sections regarding payment, confidentiality, indemnity, "
            "and dispute resolution survive termination.",
        ),
        render_clause(
            "Notices",
            "Formal communications must be sent to the addresses provided.",
            "All notices must be in writing and delivered by certified mail, courier, or "
            "confirmed email to the addresses supplied by each party.",
        ),
        render_clause(
            "Entire Agreement",
            "States this document overrides prior conversations unless amended in writing.",
            "This agreement constitutes the entire understanding between the parties and "
            "supersedes all prior proposals or discussions. Any amendment must be in writing "
            "and signed by both parties.",
        ),
        render_clause(
            "Severability",
            "If one clause is invalid, the rest still stand.",
            "If any provision is held unenforceable, the remainder will remain in full force, "
            "and the parties will replace the invalid provision with one that captures their "
            "intent.",
        ),
    ]


def governing_law_clause(state: str) -> str:
    return render_clause(
        "Governing Law",
        "Specifies the state laws and courts that control this contract.",
        f"This agreement is governed by the laws of the State of {state}, without regard "
        f"to conflicts of law. Venue lies exclusively in {state}.",
    )


def additional_notes_clause(notes: str) -> str:
    return render_clause(
        "Additional Notes", "Custom expectations recorded by the creator.", notes
    )


def custom_clauses(texts: list[str]) -> list[str]:
    """Render one numbered clause per custom text, starting at 1."""
    return [
        render_clause(f"Custom Clause {index}", CUSTOM_CLAUSE_SUMMARY, text)
        for index, text in enumerate(texts, start=1)
    ]
