"""
GraphQL documents sent to the GitHub API.

Fields are aliased onto the shape the domain layer reads:
``totalCount`` for the match count, ``username`` for the login and
``followers.count`` for the follower total.
"""

SEARCH_USERS_QUERY = """
query SearchUsers(
  $query: String!
  $first: Int
  $after: String
  $last: Int
  $before: String
) {
  search(
    query: $query
    type: USER
    first: $first
    after: $after
    last: $last
    before: $before
  ) {
    totalCount: userCount
    pageInfo {
      hasNextPage
      endCursor
      hasPreviousPage
      startCursor
    }
    edges {
      node {
        ... on User {
          username: login
          name
          avatarUrl
          followers {
            count: totalCount
          }
        }
      }
    }
  }
}
"""
