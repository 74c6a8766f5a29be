from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from strawberry.fastapi import GraphQLRouter

from .storage_factory import create_store, get_store
from .routers import graphiql_custom, schema_sdl
from .graphql_schema import build_context, schema
from survey_catalog.storage.interfaces import CatalogStoreInterface


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Builds the catalog store before the first request is served.
    """
    app.state.store = create_store()
    yield


app = FastAPI(
    title="Survey Catalog API",
    description="A read-only GraphQL API over a survey instrument metadata catalog.",
    version="0.1.0",
    lifespan=lifespan,
)


async def get_context(
    store: CatalogStoreInterface = Depends(get_store),
):
    return build_context(store)


# Mount GraphQL with context (no built-in GraphiQL)
graphql_app = GraphQLRouter(
    schema,
    graphql_ide=None,
    context_getter=get_context,
)

app.include_router(graphql_app, prefix="/graphql")

# Mount GraphiQL interface with example queries
app.include_router(graphiql_custom.router, prefix="/graphiql", tags=["GraphQL"])

# Schema in SDL form for schema-browsing tools
app.include_router(schema_sdl.router, tags=["GraphQL"])


@app.get("/health")
async def health_check(store: CatalogStoreInterface = Depends(get_store)):
    """
    Health check endpoint to verify that the server is running.
    """
    return {"status": "ok", "entities": store.entity_count}
