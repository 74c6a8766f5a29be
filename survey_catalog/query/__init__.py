"""GraphQL query layer: schema, HTTP application and routers."""
