"""GraphQL query constants for the GitHub provider."""

_PROJECT_NODE = """
        id
        number
        title
        url
        owner {
          __typename
          ... on Organization { login }
          ... on User { login }
        }
"""

LIST_REPOSITORY_PROJECTS = (
    """
query($owner: String!, $repo: String!, $cursor: String) {
  repository(owner: $owner, name: $repo) {
    projectsV2(first: 100, after: $cursor) {
      nodes {"""
    + _PROJECT_NODE
    + """      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""
)

LIST_ORGANIZATION_PROJECTS = (
    """
query($org: String!, $cursor: String) {
  organization(login: $org) {
    projectsV2(first: 100, after: $cursor) {
      nodes {"""
    + _PROJECT_NODE
    + """      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""
)

LIST_USER_PROJECTS = (
    """
query($login: String!, $cursor: String) {
  user(login: $login) {
    projectsV2(first: 100, after: $cursor) {
      nodes {"""
    + _PROJECT_NODE
    + """      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""
)

FETCH_PROJECT_FIELDS = """
query($projectId: ID!, $cursor: String) {
  node(id: $projectId) {
    ... on ProjectV2 {
      fields(first: 100, after: $cursor) {
        nodes {
          ... on ProjectV2Field { id name dataType }
          ... on ProjectV2IterationField { id name dataType }
          ... on ProjectV2SingleSelectField { id name dataType options { id name } }
        }
        pageInfo { hasNextPage endCursor }
      }
    }
  }
}
"""

VIEWER_LOGIN = """
query {
  viewer { login }
}
"""
