"""spotdocs.constants package."""
