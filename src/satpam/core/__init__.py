"""Core capability model: abilities, their token grammar, and the store."""
