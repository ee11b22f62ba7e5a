"""Pure calculation logic with no Flask or pydantic dependencies."""
