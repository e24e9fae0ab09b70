"""SQLAlchemy persistence for users and cuisines."""
