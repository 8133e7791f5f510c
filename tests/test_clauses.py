"""Tests for the clause library."""

from contract_drafter import default_registry
from contract_drafter.clauses import (
    additional_notes_clause,
    arbitration_clause,
    business_terms_clause,
    coalesce,
    custom_clauses,
    finance_clauses,
    governing_law_clause,
    ip_ownership_clause,
    overview_clause,
    party_label,
    policy_clause,
    property_clauses,
    render_clause,
    service_clauses,
    signature_block,
    standard_clauses,
)
from tests.conftest import build_payload


class TestRenderClause:
    """Tests for the clause block format."""

    def test_format(self) -> None:
        """Test heading, summary line, blank line, body."""
        block = render_clause("Business Terms", "A summary.", "The body.")
        assert block == "\nBUSINESS TERMS\nSummary: A summary.\n\nThe body.\n"

    def test_trims_summary_and_body(self) -> None:
        """Test surrounding whitespace is removed from summary and body."""
        block = render_clause("Notices", "  padded  \n", "\n  body text \n")
        assert block == "\nNOTICES\nSummary: padded\n\nbody text\n"

    def test_signature_block(self) -> None:
        """Test the signature block has one line per party."""
        block = signature_block()
        assert block.startswith("\nSIGNATURES\n\n")
        assert "Party A: ________________________________    Date: __________________\n" in block
        assert block.endswith(
            "Party B: ________________________________    Date: __________________\n"
        )


class TestCoalesce:
    """Tests for ordered fallback."""

    def test_first_with_text_wins(self) -> None:
        assert coalesce(None, "", "b", "c", default="d") == "b"

    def test_whitespace_counts_as_blank(self) -> None:
        assert coalesce("   ", default="fallback") == "fallback"

    def test_default_when_all_blank(self) -> None:
        assert coalesce(None, None, default="As agreed") == "As agreed"


class TestRequiredClauses:
    """Tests for overview and business terms."""

    def test_party_label(self) -> None:
        payload = build_payload()
        assert party_label(payload) == "Oakview Homes LLC (“Party A”) and Jordan Ellis (“Party B”)"

    def test_overview_prefers_plain_intro(self) -> None:
        template = default_registry().lookup("nda")
        payload = build_payload(plain_summary_intro="We keep each other's secrets.")
        block = overview_clause(template, payload)
        assert "Summary: We keep each other's secrets.\n" in block

    def test_overview_falls_back_to_relationship_summary(self) -> None:
        template = default_registry().lookup("nda")
        payload = build_payload(plain_summary_intro="   ")
        block = overview_clause(template, payload)
        assert "Summary: Twelve-month lease of a single-family home.\n" in block

    def test_overview_generated_summary(self) -> None:
        template = default_registry().lookup("nda")
        payload = build_payload(relationship_summary=None)
        block = overview_clause(template, payload)
        assert (
            "Summary: This document outlines how Oakview Homes LLC and Jordan Ellis "
            "will work together.\n"
        ) in block

    def test_overview_body(self) -> None:
        template = default_registry().lookup("nda")
        block = overview_clause(template, build_payload())
        assert block.startswith("\nPLAIN-ENGLISH OVERVIEW\n")
        assert block.endswith(
            "\n\nTwo-way confidentiality for hiring, fundraising, or partnerships. "
            "This agreement is effective 2025-03-01 and binds Oakview Homes LLC "
            "(“Party A”) and Jordan Ellis (“Party B”).\n"
        )

    def test_business_terms_fallbacks(self) -> None:
        block = business_terms_clause(build_payload())
        assert (
            "Summary: Defines compensation, timing, and other commercial expectations.\n"
        ) in block
        assert (
            "Compensation: As described in the attached schedule\n"
            "Term: 2025-03-01 through until completion.\n"
        ) in block

    def test_business_terms_uses_payment_and_term(self) -> None:
        payload = build_payload(
            payment_terms="Net 30",
            term_start="2025-04-01",
            term_end="2026-03-31",
        )
        block = business_terms_clause(payload)
        assert "Summary: Net 30\n" in block
        assert "Compensation: Net 30\nTerm: 2025-04-01 through 2026-03-31." in block

    def test_payment_details_precede_terms(self) -> None:
        payload = build_payload(payment_details="$5,000 upfront", payment_terms="Net 30")
        block = business_terms_clause(payload)
        assert "Summary: $5,000 upfront\n" in block
        assert "Compensation: $5,000 upfront\n" in block


class TestCategoryClauses:
    """Tests for category-specific clause sets."""

    def test_service_clauses_skip_empty_fields(self) -> None:
        payload = build_payload(scope_of_work="Build a website.", milestones="  ")
        sections = service_clauses(payload)
        assert len(sections) == 1
        assert sections[0].startswith("\nSCOPE OF SERVICES\n")

    def test_service_clauses_order(self) -> None:
        payload = build_payload(
            service_guarantees="99.9% uptime",
            revisions="Two rounds",
            warranty_terms="90 days",
            milestones="Beta by June",
            deliverables="Source code",
            scope_of_work="Build a website.",
        )
        headings = [s.split("\n")[1] for s in service_clauses(payload)]
        assert headings == [
            "SCOPE OF SERVICES",
            "DELIVERABLES",
            "MILESTONES & TIMELINE",
            "QUALITY & REVISIONS",
            "REVISION WINDOWS",
            "SERVICE GUARANTEES",
        ]

    def test_finance_omitted_without_core_fields(self) -> None:
        payload = build_payload(late_fees="5%", finance_penalties="Acceleration")
        assert finance_clauses(payload) == []

    def test_finance_placeholders(self) -> None:
        payload = build_payload(collateral="2019 Ford F-150")
        (block,) = finance_clauses(payload)
        assert block.endswith(
            "\n\nInterest Rate: As agreed\n"
            "Repayment Schedule: See attached amortization\n"
            "Collateral: 2019 Ford F-150\n"
            "Late Fees: As permitted by law\n"
        )

    def test_finance_penalties_line(self) -> None:
        payload = build_payload(interest_rate="6% APR", finance_penalties="Acceleration")
        (block,) = finance_clauses(payload)
        assert block.endswith("Late Fees: As permitted by law\nPenalties: Acceleration\n")

    def test_property_omitted_without_address_or_price(self) -> None:
        payload = build_payload(deposit_amount="$500")
        assert property_clauses(payload) == []

    def test_property_price_falls_back_to_payment_details(self) -> None:
        payload = build_payload(property_address="214 Oakview Dr", payment_details="$1900/mo")
        (block,) = property_clauses(payload)
        assert block.endswith(
            "\n\nProperty: 214 Oakview Dr\nPrice/Rent: $1900/mo\nDeposit: Per invoice\n"
        )

    def test_property_placeholders(self) -> None:
        payload = build_payload(purchase_price="$350,000")
        (block,) = property_clauses(payload)
        assert "Property: Described in Exhibit A\nPrice/Rent: $350,000\n" in block

    def test_policy_clause(self) -> None:
        template = default_registry().lookup("privacy-policy")
        block = policy_clause(template, build_payload())
        assert block.startswith("\nPOLICY STATEMENT\n")
        assert block.endswith(
            "GDPR + U.S. compliant privacy notice. Oakview Homes LLC may update this "
            "policy by providing notice to impacted users.\n"
        )


class TestToggleAndTrailingClauses:
    """Tests for toggle, standard, and trailing clauses."""

    def test_ip_default_work_for_hire(self) -> None:
        block = ip_ownership_clause(build_payload())
        assert (
            "all deliverables created by Oakview Homes LLC for Jordan Ellis are deemed "
            "work made for hire and owned by Jordan Ellis."
        ) in block

    def test_ip_explicit_ownership(self) -> None:
        block = ip_ownership_clause(build_payload(ownership_details="Party A keeps all IP."))
        assert block.endswith("\n\nParty A keeps all IP.\n")

    def test_arbitration_names_state(self) -> None:
        assert "binding arbitration administered in NY," in arbitration_clause("NY")

    def test_governing_law_names_state(self) -> None:
        block = governing_law_clause("CA")
        assert "governed by the laws of the State of CA" in block
        assert "Venue lies exclusively in CA." in block

    def test_standard_clause_order(self) -> None:
        headings = [s.split("\n")[1] for s in standard_clauses(build_payload())]
        assert headings == [
            "REPRESENTATIONS & WARRANTIES",
            "TERMINATION",
            "NOTICES",
            "ENTIRE AGREEMENT",
            "SEVERABILITY",
        ]

    def test_additional_notes(self) -> None:
        block = additional_notes_clause("Keys returned at move-out.")
        assert block == (
            "\nADDITIONAL NOTES\nSummary: Custom expectations recorded by the creator."
            "\n\nKeys returned at move-out.\n"
        )

    def test_custom_clauses_numbered_from_one(self) -> None:
        blocks = custom_clauses(["First.", "Second."])
        assert blocks == [
            "\nCUSTOM CLAUSE 1\nSummary: Added by the contract creator.\n\nFirst.\n",
            "\nCUSTOM CLAUSE 2\nSummary: Added by the contract creator.\n\nSecond.\n",
        ]
