"""Company handlers."""

from apps.companies.handlers.update_company import UpdateCompanyInput, update_company

__all__ = ["UpdateCompanyInput", "update_company"]
