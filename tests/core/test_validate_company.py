"""Save Validation — tests for the pure candidate rules.

Tests cover:
    - Blank codes (empty, whitespace, None) are MISSING_CODE regardless of other fields
    - Differing codes on update are CANNOT_CHANGE_CODE
    - A preset site on create is INVALID_VALUE
    - First failing rule wins
    - Valid creates and updates pass (None)
"""

import pytest

from company_api.core.company_record import CompanyInfo
from company_api.core.domain_types import SaveResult
from company_api.core.validate_company import check_save_candidate, has_company_code


# ─── has_company_code ────────────────────────────────────────────

@pytest.mark.parametrize("code", ["", " ", "\t\n", None])
def test_has_company_code_false_for_blank(code):
    assert has_company_code(CompanyInfo(company_code=code)) is False


def test_has_company_code_true_for_padded_code():
    assert has_company_code(CompanyInfo(company_code=" ACME ")) is True


# ─── check_save_candidate ────────────────────────────────────────

@pytest.mark.parametrize("code", ["", "   ", "\t", None])
@pytest.mark.parametrize("site_id", [None, "Bravo"])
def test_blank_code_is_missing_code_on_create(code, site_id):
    candidate = CompanyInfo(company_code=code, site_id=site_id, company_name="X")
    assert check_save_candidate(candidate) == SaveResult.MISSING_CODE


@pytest.mark.parametrize("code", ["", "   ", None])
def test_blank_code_is_missing_code_on_update(code):
    existing = CompanyInfo(company_code="ACME", site_id="Hotel")
    result = check_save_candidate(CompanyInfo(company_code=code), existing)
    assert result == SaveResult.MISSING_CODE


@pytest.mark.parametrize("new_code", ["OTHER", "acme", "ACME "])
def test_differing_code_cannot_change(new_code):
    existing = CompanyInfo(company_code="ACME", site_id="Hotel")
    result = check_save_candidate(CompanyInfo(company_code=new_code), existing)
    assert result == SaveResult.CANNOT_CHANGE_CODE


def test_code_change_checked_before_site():
    existing = CompanyInfo(company_code="ACME", site_id="Hotel")
    candidate = CompanyInfo(company_code="OTHER", site_id="Bravo")
    assert check_save_candidate(candidate, existing) == SaveResult.CANNOT_CHANGE_CODE


@pytest.mark.parametrize("site_id", ["Bravo", "Hotel", "Lima", "Elsewhere", ""])
def test_preset_site_on_create_is_invalid_value(site_id):
    candidate = CompanyInfo(company_code="ACME", site_id=site_id)
    assert check_save_candidate(candidate) == SaveResult.INVALID_VALUE


def test_valid_create_passes():
    assert check_save_candidate(CompanyInfo(company_code="ACME")) is None


def test_valid_update_passes_even_with_site():
    existing = CompanyInfo(company_code="ACME", site_id="Hotel")
    candidate = CompanyInfo(company_code="ACME", site_id="Lima")
    assert check_save_candidate(candidate, existing) is None
