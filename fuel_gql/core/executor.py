"""GraphQL executor for sending queries to a Fuel GraphQL endpoint.

Handles HTTP communication, the response envelope and query errors.
"""

import logging
import time
from typing import Any

import httpx
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class QueryErrorLocation(BaseModel):
    line: int
    column: int

    def __str__(self) -> str:
        return f"(line:{self.line},column:{self.column})"


class QueryError(BaseModel):
    """One entry of the ``errors`` list of a GraphQL response."""

    message: str
    locations: list[QueryErrorLocation] = Field(default_factory=list)

    def __str__(self) -> str:
        return ",".join(str(loc) for loc in self.locations) + f": {self.message}"


class QueryResponse(BaseModel):
    """The GraphQL response envelope."""

    data: dict[str, Any] | None = None
    errors: list[QueryError] = Field(default_factory=list)


class GraphQLError(Exception):
    """Exception raised when the endpoint reports query errors.

    All errors of the response are reported together, one per line.
    """

    def __init__(self, errors: list[QueryError]):
        self.errors = errors
        self.message = "execute query failed: " + "\n".join(str(e) for e in errors)
        super().__init__(self.message)


class GraphQLExecutor:
    """Executes query text against a GraphQL endpoint.

    Example:
        executor = GraphQLExecutor("https://testnet.fuel.network/v1/graphql")
        data = await executor.execute("{ chain { name } }")
        await executor.close()

        # Tests can route requests to an in-process handler
        executor = GraphQLExecutor(url, transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the executor.

        Args:
            url: GraphQL endpoint URL
            headers: Extra headers sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self._headers = dict(headers or {})
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json", "Accept": "application/json"}
            headers.update(self._headers)

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def execute(self, query: str) -> dict[str, Any]:
        """Execute a query.

        Args:
            query: GraphQL query text

        Returns:
            The 'data' portion of the response

        Raises:
            GraphQLError: If the response contains errors
            httpx.HTTPStatusError: On a failed HTTP status without GraphQL errors
        """
        client = await self._get_client()
        logger.debug("executing query against %s: %s", self.url, query)

        started = time.monotonic()
        try:
            response = await client.post(self.url, json={"query": query})
        except httpx.HTTPError as e:
            logger.warning("request to %s failed: %s", self.url, e)
            raise
        logger.debug("response status %d in %.3fs", response.status_code, time.monotonic() - started)

        try:
            result = QueryResponse.model_validate_json(response.content)
        except ValueError:
            # Not a GraphQL envelope; surface the HTTP status if it is an error.
            response.raise_for_status()
            raise

        if result.errors:
            logger.warning("query returned %d error(s)", len(result.errors))
            raise GraphQLError(result.errors)
        response.raise_for_status()

        return result.data or {}
