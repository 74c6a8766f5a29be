"""
Schema download for schema-browsing tools.

Serves the GraphQL schema in SDL form so external explorers and
visualizers can load it without running an introspection query.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..graphql_schema import schema

router = APIRouter()


@router.get("/schema.graphql", response_class=PlainTextResponse)
async def schema_sdl():
    """
    Return the GraphQL schema as SDL text.
    """
    return schema.as_str()
