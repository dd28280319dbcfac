"""Built-in catalog of named-variable templates."""

import logging
from collections.abc import Mapping

from docfill.core.exceptions import NotFoundError
from docfill.strategies.template_engine.models import VariableTemplate
from docfill.strategies.template_engine.substitution import substitute

logger = logging.getLogger(__name__)


LEASE_AGREEMENT = """
LEASE AGREEMENT

THIS LEASE AGREEMENT is made this {{current_date}} between {{landlord_name}} of {{landlord_address}} (the "Landlord") and {{tenant_name}} of {{tenant_address}} (the "Tenant").

PREMISES: The premises located at {{site_location}}, Title Number {{title_number}}, measuring approximately {{land_area}}.

TERM: This lease shall commence on {{commencement_date}} for a period of {{lease_term}} years.

RENT: The monthly rent shall be KES {{monthly_rent}}, payable in advance on the first day of each month, subject to annual escalation of {{escalation_rate}}% per annum.

DEPOSIT: A security deposit of KES {{deposit}} shall be paid upon execution of this agreement.

Site Code: {{site_code}}
File Reference: {{file_ref}}

IN WITNESS WHEREOF, the parties have executed this agreement on the date first written above.

Landlord: _________________    Tenant: _________________
{{landlord_name}}             {{tenant_name}}
"""

LICENCE_AGREEMENT = """
LICENCE AGREEMENT

THIS LICENCE AGREEMENT is made this {{current_date}} between {{landlord_name}} of {{landlord_address}} (the "Licensor") and {{tenant_name}} of {{tenant_address}} (the "Licensee").

LICENSED PREMISES: The premises located at {{site_location}}, Title Number {{title_number}}, measuring approximately {{land_area}}.

LICENCE PERIOD: This licence shall commence on {{commencement_date}} for a period of {{lease_term}} years.

LICENCE FEE: The monthly licence fee shall be KES {{monthly_rent}}, payable monthly in advance.

Site Code: {{site_code}}
File Reference: {{file_ref}}

IN WITNESS WHEREOF, the parties have executed this agreement.

Licensor: _________________    Licensee: _________________
{{landlord_name}}             {{tenant_name}}
"""

COMPLETION_REPORT = """
REQUEST FOR OPINION FORM 6 (ROF 6)
COMPLETION REPORT

Site Code: {{site_code}}
Location: {{site_location}}
File Reference: {{file_ref}}
Date: {{current_date}}

To: In-House Counsel
From: External Counsel

RE: {{landlord_name}} - {{site_location}}

We confirm that we have completed the above instruction and attach the following documents:

1. Original executed {{lease_type}}
2. Certified copy of Title Deed
3. Consent to Lease (if applicable)
4. Registration Certificate

Total Professional Fees: KES {{total_fees}}
VAT (16%): KES {{vat_amount}}
Total Amount Due: KES {{total_amount}}

Yours faithfully,
External Counsel
"""

FEE_NOTE = """
PROFESSIONAL FEE NOTE

Date: {{current_date}}
File Reference: {{file_ref}}
Site Code: {{site_code}}

TO: {{tenant_name}}
    {{tenant_address}}

RE: {{site_location}} - {{landlord_name}}

Professional Services Rendered:
- Legal advice and document preparation
- Due diligence and title verification
- Lease negotiation and execution

Professional Fees: KES {{total_fees}}
VAT (16%): KES {{vat_amount}}
TOTAL AMOUNT DUE: KES {{total_amount}}

Payment due within 30 days of this invoice date.

External Counsel
"""


class TemplateCatalog:
    """Read-only registry of variable templates keyed by id."""

    def __init__(self, templates: list[VariableTemplate] | None = None) -> None:
        templates = BUILTIN_TEMPLATES if templates is None else templates
        self._templates = {template.id: template for template in templates}

    def list_templates(self) -> list[VariableTemplate]:
        return list(self._templates.values())

    def get(self, template_id: str) -> VariableTemplate:
        """Return a template by id.

        Raises:
            NotFoundError: If the id is unknown.
        """
        try:
            return self._templates[template_id]
        except KeyError:
            raise NotFoundError(f"Template {template_id} not found", template_id) from None

    def render(self, template_id: str, bindings: Mapping[str, str]) -> str:
        """Substitute ``bindings`` into the template ``template_id``."""
        template = self.get(template_id)
        logger.info(f"Rendering template {template_id} with {len(bindings)} bindings")
        return substitute(template.content, bindings)


BUILTIN_TEMPLATES: list[VariableTemplate] = [
    VariableTemplate(id="lease-agreement", name="Lease Agreement", content=LEASE_AGREEMENT),
    VariableTemplate(id="licence-agreement", name="Licence Agreement", content=LICENCE_AGREEMENT),
    VariableTemplate(id="rof6-template", name="ROF 6 Template", content=COMPLETION_REPORT),
    VariableTemplate(id="fee-note", name="Fee Note", content=FEE_NOTE),
]
