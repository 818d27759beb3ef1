"""GitHub provider: GraphQL client and project resolver."""

from ghpm.providers.github.client import GitHubGraphQLClient
from ghpm.providers.github.resolver import ProjectResolver

__all__ = ["GitHubGraphQLClient", "ProjectResolver"]
