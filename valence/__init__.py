"""Building blocks for Minecraft servers: identifiers, dimensions, chunk positions, paletted containers and entities."""

__version__ = "0.1.0"