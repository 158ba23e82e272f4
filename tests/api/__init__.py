"""API tests package.

End-to-end tests for REST API endpoints using TestClient.
Tests the complete request/response cycle including:
- Bearer claims authentication
- Route guard decisions
- Admin lifecycle commands
- Uniform 401/403 responses

Note:
    API tests run against the real container. Tokens are issued through
    the ClaimsIssuer after seeding the in-memory role store.
"""
