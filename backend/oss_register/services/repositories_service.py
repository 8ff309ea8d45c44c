"""Repositories Service — registering, retrieving and listing OSS repositories.

Params:
    create_repository: {"postRepository": {"gitOrganisationUrl", "organisationUrl"}}
    get_repository_by_id: {"id": str}
    list_repositories: {"status"?, "page"?, "perPage"?, "organisation"?, "ids"?}
    search_repositories: {"q", "page"?, "perPage"?, "organisation"?}
"""

from oss_register.services.operation import wrap

SERVICE_NAME = "RepositoriesService"

create_repository = wrap(SERVICE_NAME, "createRepository")
get_repository_by_id = wrap(SERVICE_NAME, "getRepositoryById")
list_repositories = wrap(SERVICE_NAME, "listRepositories")
search_repositories = wrap(SERVICE_NAME, "searchRepositories")
