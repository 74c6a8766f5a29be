"""
Example GraphQL queries for the Survey Catalog API.

These queries are displayed in the GraphiQL interface to help users get started.
"""

EXAMPLE_QUERIES = {
    "List Question Blocks": """# List every question block with its questions in order
query ListQuestionBlocks {
  allQuestionBlocks {
    id
    name
    questions {
      id
      name
    }
  }
}""",
    "Get Question": """# Follow a question to its represented variable and variable
query GetQuestion {
  Question(id: 9) {
    name
    description
    representedVariable {
      id
      name
      variable {
        id
        name
      }
    }
  }
}""",
    "Variable Representations": """# Find every represented variable derived from a variable
query VariableRepresentations {
  Variable(id: 1) {
    name
    unitTypeId {
      name
    }
    measures {
      name
    }
    representedVariable {
      id
      name
      description
    }
  }
}""",
    "Unit Types": """# Unit types and the concepts they are based on
query UnitTypes {
  allUnitTypes {
    id
    name
    isBasedOn {
      id
      name
    }
  }
}""",
    "Concepts": """# List all concepts
query Concepts {
  allConcepts {
    id
    name
    description
  }
}""",
}

# Default query shown when GraphiQL first loads
DEFAULT_QUERY = EXAMPLE_QUERIES["List Question Blocks"]
