"""Public Endpoints Service — organisation registration and listing.

Params:
    create_organisation: {"organisationSummary": {"uri", "label"}}
    list_organisations: {}
"""

from oss_register.services.operation import wrap

SERVICE_NAME = "PublicEndpointsService"

create_organisation = wrap(SERVICE_NAME, "createOrganisation")
list_organisations = wrap(SERVICE_NAME, "listOrganisations")
