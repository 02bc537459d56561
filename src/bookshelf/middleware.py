"""
Middleware for request context and logging
"""

import json
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from graphql import GraphQLError, OperationDefinitionNode, OperationType, parse
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
_REDACTED_GRAPHQL_PARAMS = ("query", "variables", "extensions")
UNNAMED_OPERATION = "unnamed_operation"


def operation_name_from_payload(data: dict[str, Any]) -> str | None:
    """Work out a loggable operation name from a GraphQL request payload.

    Uses ``operationName`` when given, otherwise the first operation defined in
    the query document. Mutations are prefixed with ``mutation:``. Introspection
    queries report as ``__introspection``.
    """
    op = data.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = data.get("query", "")
    if not isinstance(q, str) or not q:
        return None
    if "__schema" in q or "IntrospectionQuery" in q:
        return "__introspection"

    try:
        document = parse(q, no_location=True)
    except GraphQLError:
        return UNNAMED_OPERATION

    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            kind = "mutation:" if definition.operation is OperationType.MUTATION else ""
            name = definition.name.value if definition.name else UNNAMED_OPERATION
            return f"{kind}{name}"
    return UNNAMED_OPERATION


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        return operation_name_from_payload(dict(request.query_params))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return operation_name_from_payload(data)

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        graphql_operation = await extract_graphql_operation_name(request)
        set_request_context(operation=graphql_operation)

        try:
            query_params = None
            if request.query_params:
                query_params = dict(request.query_params)
                # Never log raw GraphQL payloads sent in the query string
                if request.url.path == GRAPHQL_PATH:
                    for key in _REDACTED_GRAPHQL_PARAMS:
                        if key in query_params:
                            query_params[key] = "[REDACTED]"

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=query_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
