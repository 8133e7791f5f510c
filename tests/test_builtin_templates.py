"""Tests for the built-in template catalog."""

import pytest

from contract_drafter import (
    CATEGORY_CHECKLISTS,
    CATEGORY_LABELS,
    BuiltinTemplates,
    ConfigurationError,
    ContractType,
    TemplateCategory,
    default_registry,
)


class TestCategoryDefaults:
    """Tests for category-level defaults."""

    def test_every_category_has_label_and_checklist(self) -> None:
        assert set(CATEGORY_LABELS) == set(TemplateCategory)
        assert set(CATEGORY_CHECKLISTS) == set(TemplateCategory)

    @pytest.mark.parametrize("category", list(TemplateCategory))
    def test_three_checklist_lines(self, category: TemplateCategory) -> None:
        assert len(CATEGORY_CHECKLISTS[category]) == 3

    def test_finance_label(self) -> None:
        assert CATEGORY_LABELS[TemplateCategory.FINANCE] == "Deposits & Guarantees"


class TestBuiltinTemplates:
    """Tests for the catalog entries."""

    def test_one_template_per_contract_type(self) -> None:
        templates = BuiltinTemplates.get_all()
        assert set(templates) == {t.value for t in ContractType}

    def test_category_label_derived(self) -> None:
        for template in BuiltinTemplates.get_all().values():
            assert template.category_label == CATEGORY_LABELS[template.category]

    def test_checklist_falls_back_to_category(self) -> None:
        lease = BuiltinTemplates.get_all()["residential-lease"]
        assert lease.checklist == CATEGORY_CHECKLISTS[TemplateCategory.REAL_ESTATE]

    def test_type_specific_checklist(self) -> None:
        safe = BuiltinTemplates.get_all()["investor-safe"]
        assert safe.checklist == (
            "Company valuation cap or discount",
            "Investor name",
            "Funding amount",
        )

    def test_seo_title_default(self) -> None:
        lease = BuiltinTemplates.get_all()["residential-lease"]
        assert lease.seo_title == "Residential Lease Agreement Template"

    def test_residential_lease(self) -> None:
        lease = BuiltinTemplates.get_all()["residential-lease"]
        assert lease.label == "Residential Lease Agreement"
        assert lease.category is TemplateCategory.REAL_ESTATE
        assert lease.category_label == "Real Estate"


class TestBuiltinRegistry:
    """Tests for the registry built from the catalog."""

    def test_create_registry(self) -> None:
        registry = BuiltinTemplates.create_registry()
        assert len(registry) == len(ContractType)
        assert registry.frozen

    def test_registry_is_read_only(self) -> None:
        registry = BuiltinTemplates.create_registry()
        with pytest.raises(ConfigurationError):
            registry.register(registry.lookup("nda"), overwrite=True)

    def test_default_registry_is_shared(self) -> None:
        assert default_registry() is default_registry()

    def test_finance_templates(self) -> None:
        finance = default_registry().search_by_category("finance")
        assert [t.identifier for t in finance] == [
            "investor-safe",
            "promissory-note",
            "loan-agreement",
        ]
