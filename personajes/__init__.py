"""Role-playing characters: a base character with weapons, mages and four mage kinds."""

__version__ = "0.1.0"
__all__ = ["enums", "personaje", "mago", "hechicero", "brujo", "conjurador", "nigromante"]