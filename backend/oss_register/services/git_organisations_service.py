"""Git Organisations Service — git hosting organisations harvested for repositories.

Params:
    create_git_organisation: {"gitOrganisation": {"url", "organisationUri"}}
    list_git_organisations: {"page"?, "perPage"?, "organisation"?}
"""

from oss_register.services.operation import wrap

SERVICE_NAME = "GitOrganisationsService"

create_git_organisation = wrap(SERVICE_NAME, "createGitOrganisation")
list_git_organisations = wrap(SERVICE_NAME, "listGitOrganisations")
