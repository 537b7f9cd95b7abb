"""Infrastructure: SQLAlchemy persistence over the genealogy store, renderers."""
