"""spotdocs.parsers package."""
