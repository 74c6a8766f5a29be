"""
GraphiQL page for exploring the catalog.

Serves a GraphiQL HTML page with a dropdown menu of example queries.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
import json

from ..graphql_examples import EXAMPLE_QUERIES, DEFAULT_QUERY

router = APIRouter()


def create_graphiql_html(graphql_endpoint: str = "/graphql") -> str:
    """
    Create GraphiQL HTML with an example queries dropdown.

    Attributes:

        graphql_endpoint: The GraphQL endpoint URL

    Returns: HTML string for the GraphiQL interface
    """
    examples_js = json.dumps(EXAMPLE_QUERIES, indent=2)
    default_query_js = json.dumps(DEFAULT_QUERY)

    return f"""<!DOCTYPE html>
<html>
<head>
    <title>Survey Catalog - GraphiQL</title>
    <style>
        body {{
            margin: 0;
            height: 100vh;
            overflow: hidden;
        }}
        #graphiql {{
            height: 100vh;
        }}
        #examples {{
            position: absolute;
            top: 10px;
            right: 60px;
            z-index: 100;
        }}
        #examples select {{
            padding: 6px 10px;
            border: 1px solid #d6d6d6;
            border-radius: 4px;
            font-size: 14px;
        }}
    </style>
    <link rel="stylesheet" href="https://unpkg.com/graphiql@3/graphiql.min.css" />
</head>
<body>
    <div id="graphiql">Loading...</div>
    <div id="examples">
        <select id="example-selector">
            <option value="">-- Example queries --</option>
        </select>
    </div>

    <script crossorigin src="https://unpkg.com/react@18/umd/react.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/react-dom@18/umd/react-dom.production.min.js"></script>
    <script crossorigin src="https://unpkg.com/graphiql@3/graphiql.min.js"></script>

    <script>
        const examples = {examples_js};
        const fetcher = GraphiQL.createFetcher({{ url: '{graphql_endpoint}' }});

        function CatalogGraphiQL() {{
            const [query, setQuery] = React.useState({default_query_js});
            React.useEffect(() => {{
                window.setGraphiQLQuery = setQuery;
            }}, []);
            return React.createElement(GraphiQL, {{
                fetcher: fetcher,
                query: query,
                onEditQuery: setQuery
            }});
        }}

        ReactDOM.createRoot(document.getElementById('graphiql')).render(React.createElement(CatalogGraphiQL));

        const selector = document.getElementById('example-selector');
        Object.keys(examples).forEach(name => {{
            const option = document.createElement('option');
            option.value = name;
            option.textContent = name;
            selector.appendChild(option);
        }});
        selector.addEventListener('change', (e) => {{
            const name = e.target.value;
            if (name && examples[name] && window.setGraphiQLQuery) {{
                window.setGraphiQLQuery(examples[name]);
            }}
            e.target.value = '';
        }});
    </script>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse)
async def graphiql_interface():
    """
    Serve the GraphiQL interface with example queries dropdown.
    """
    return create_graphiql_html()
