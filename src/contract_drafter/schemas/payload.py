"""Form payload schema.

The payload is what the guided form submits. This model is deliberately
lenient: minimum lengths and enumerations are enforced by
``contract_drafter.core.validation`` at the request boundary, so the
composer can be driven by any data that has already passed it.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContractFormPayload(BaseModel):
    """Structured answers driving document generation.

    Attribute names are snake_case; the camelCase names used on the wire
    (``partyOneName``, ``includeArbitration``...) are accepted as aliases.

    Example:
        ```python
        payload = ContractFormPayload.model_validate(
            {"contractType": "nda", "partyOneName": "Acme", ...}
        )
        payload.model_dump(by_alias=True)
        ```
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    contract_type: str = Field(description="Template identifier")

    # Parties
    party_one_name: str = Field(description="Legal name rendered as Party A")
    party_one_address: str | None = Field(default=None, description="Party A mailing address")
    party_two_name: str = Field(description="Legal name rendered as Party B")
    party_two_address: str | None = Field(default=None, description="Party B mailing address")

    # Dates and jurisdiction (free text, never parsed)
    effective_date: str = Field(description="Date the agreement takes effect")
    term_start: str | None = Field(default=None, description="Start of the term")
    term_end: str | None = Field(default=None, description="End of the term")
    governing_law: str = Field(description="Two-letter U.S. state code")

    relationship_summary: str | None = Field(
        default=None, description="Short description of the relationship"
    )

    # Commercial terms
    payment_terms: str | None = Field(default=None, description="Payment terms")
    payment_details: str | None = Field(default=None, description="Payment amounts and timing")

    # Service / employment
    scope_of_work: str | None = Field(default=None, description="Duties and expectations")
    deliverables: str | None = Field(default=None, description="What will be handed over")
    milestones: str | None = Field(default=None, description="Checkpoints and review dates")
    revisions: str | None = Field(default=None, description="Included revision rounds")
    warranty_terms: str | None = Field(default=None, description="Warranty coverage")
    service_guarantees: str | None = Field(
        default=None, description="Uptime, response time, or satisfaction guarantees"
    )
    ownership_details: str | None = Field(
        default=None, description="Explicit IP ownership terms"
    )

    # Real estate / transaction
    property_address: str | None = Field(default=None, description="Property or asset")
    purchase_price: str | None = Field(default=None, description="Price or rent")
    deposit_amount: str | None = Field(default=None, description="Deposit")

    # Finance
    collateral: str | None = Field(default=None, description="Collateral or security")
    interest_rate: str | None = Field(default=None, description="Interest rate")
    repayment_schedule: str | None = Field(default=None, description="Repayment schedule")
    late_fees: str | None = Field(default=None, description="Late fees")
    finance_penalties: str | None = Field(default=None, description="Additional penalties")

    plain_summary_intro: str | None = Field(
        default=None, description="Plain-English intro shown as the overview summary"
    )

    # Clause toggles
    include_confidentiality: bool = Field(default=True)
    include_indemnification: bool = Field(default=True)
    include_liability_cap: bool = Field(default=True)
    include_non_solicitation: bool = Field(default=True)
    include_arbitration: bool = Field(default=True)
    include_ip_ownership: bool = Field(default=True)

    optional_clauses: list[str] = Field(
        default_factory=list,
        description="Custom clause texts, each rendered as its own numbered clause",
    )
    custom_notes: str | None = Field(default=None, description="Additional notes")
