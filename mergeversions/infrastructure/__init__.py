"""Infrastructure : persistance SQLModel de la videotheque."""
