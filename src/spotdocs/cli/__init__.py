"""spotdocs.cli package."""
