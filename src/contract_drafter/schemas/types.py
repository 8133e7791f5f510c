"""Closed vocabularies shared by templates and payloads."""

from enum import Enum


class TemplateCategory(str, Enum):
    """Template classification that selects the category-specific clause block."""

    SERVICE = "service"
    FINANCE = "finance"
    POLICY = "policy"
    REAL_ESTATE = "real-estate"
    EMPLOYMENT = "employment"
    TRANSACTION = "transaction"
    INTELLECTUAL = "intellectual"


class ContractType(str, Enum):
    """Identifiers of every contract type in the template catalog."""

    RESIDENTIAL_LEASE = "residential-lease"
    RENTAL_RESIDENTIAL = "rental-residential"
    RENTAL_COMMERCIAL = "rental-commercial"
    NDA = "nda"
    TEAM_NDA = "team-nda"
    NON_COMPETE = "non-compete"
    INVESTOR_SAFE = "investor-safe"
    PURCHASE_ORDER = "purchase-order"
    MASTER_SERVICE = "master-service"
    CONSULTING_SIMPLE = "consulting-simple"
    CONSULTING_EXTENDED = "consulting-extended"
    SOCIAL_MEDIA_INFLUENCER = "social-media-influencer"
    CONTRACTOR_1099 = "contractor-1099"
    FREELANCE = "freelance"
    EMPLOYMENT_OFFER = "employment-offer"
    EMPLOYMENT_OFFER_EXTENDED = "employment-offer-extended"
    GENERAL_SERVICE = "general-service"
    PARTNERSHIP_LLC = "partnership-llc"
    WEBSITE_TOS = "website-tos"
    PRIVACY_POLICY = "privacy-policy"
    REFUND_POLICY = "refund-policy"
    CREATOR_COPYRIGHT_TRANSFER = "creator-copyright-transfer"
    SOFTWARE_LICENSE = "software-license"
    SUBCONTRACTOR = "subcontractor"
    MAINTENANCE_SUPPORT = "maintenance-support"
    REAL_ESTATE_PURCHASE = "real-estate-purchase"
    BILL_OF_SALE = "bill-of-sale"
    VEHICLE_SALE_EXTENDED = "vehicle-sale-extended"
    PROMISSORY_NOTE = "promissory-note"
    LOAN_AGREEMENT = "loan-agreement"


US_STATES: tuple[str, ...] = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "DC", "FL",
    "GA", "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME",
    "MD", "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH",
    "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI",
    "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI",
    "WY",
)  # fmt: skip
